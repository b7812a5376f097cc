from sqlalchemy import ForeignKey
from sqlalchemy.orm import DeclarativeBase, relationship
from sqlalchemy.schema import Column
from sqlalchemy.types import JSON, DateTime, Float, Integer, String, TEXT
from datetime import datetime

from gardenplan.domain.identifiers import generate_prefixed_id


class Base(DeclarativeBase):
    pass


class Garden(Base):
    __tablename__ = "garden"
    id = Column(String, primary_key=True, default=lambda: generate_prefixed_id("grdn"))
    name = Column(String(255))
    description = Column(String(255))
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    beds = relationship(
        "Bed",
        back_populates="garden",
        cascade="all, delete",
        order_by="Bed.created_at",
    )


class Bed(Base):
    __tablename__ = "garden_bed"
    id = Column(String, primary_key=True, default=lambda: generate_prefixed_id("bed"))
    garden_id = Column(String, ForeignKey("garden.id"))
    name = Column(String(255), default="")
    description = Column(String(255), default="")
    width = Column(Float)
    height = Column(Float)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    garden = relationship("Garden", back_populates="beds")
    plants = relationship(
        "Plant",
        back_populates="bed",
        cascade="all, delete",
        order_by="Plant.created_at",
    )


class Plant(Base):
    __tablename__ = "plant"
    id = Column(String, primary_key=True, default=lambda: generate_prefixed_id("plant"))
    bed_id = Column(String, ForeignKey("garden_bed.id"), nullable=True)
    name = Column(String(255))
    family = Column(String(255))
    variant = Column(String(255))
    position_x = Column(Float, nullable=True)
    position_y = Column(Float, nullable=True)
    icon_path = Column(TEXT, nullable=True)
    accent_color = Column(JSON, nullable=True)  # {"red": .., "green": .., "blue": .., "alpha": ..}
    planting_distance_value = Column(Float, nullable=True)
    planting_distance_unit = Column(String(16), nullable=True)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    bed = relationship("Bed", back_populates="plants")


class Location(Base):
    __tablename__ = "location"
    id = Column(String, primary_key=True, default=lambda: generate_prefixed_id("loc"))
    name = Column(TEXT)
    region = Column(TEXT)
    country = Column(TEXT)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    monthly_temperatures = relationship(
        "MonthlyTemperatureRange",
        back_populates="location",
        cascade="all, delete",
        order_by="MonthlyTemperatureRange.month",
    )


class MonthlyTemperatureRange(Base):
    __tablename__ = "monthly_temperature_range"
    id = Column(String, primary_key=True, default=lambda: generate_prefixed_id("mtr"))
    location_id = Column(String, ForeignKey("location.id"))
    month = Column(Integer)
    min = Column(JSON)  # {"value": 5.2, "unit": "C"}
    max = Column(JSON)

    location = relationship("Location", back_populates="monthly_temperatures")
