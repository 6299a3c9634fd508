# models/visitor.py
import enum

from sqlalchemy import Column, Date, Integer, String
from sqlalchemy.orm import relationship

from .base import Base, RecordStatus, TimestampMixin, enum_type


class Gender(str, enum.Enum):
     MALE = "male"
     FEMALE = "female"
     OTHER = "other"


class Visitor(TimestampMixin, Base):
     """
     Visitor model - a person identified by their ID document.
     Independent of any single visit.
     """
     __tablename__ = "visitors"

     id = Column(Integer, primary_key=True, autoincrement=True)
     fullname = Column(String(200), nullable=False)
     id_number = Column(String(100), unique=True, nullable=False, index=True)
     birthday = Column(Date, nullable=False)
     gender = Column(enum_type(Gender, "visitor_gender"), nullable=False)
     region = Column(String(100), nullable=False)
     expire_date = Column(Date, nullable=False)  # ID document expiry
     phone = Column(String(50), nullable=False)
     status = Column(
          enum_type(RecordStatus, "visitor_status"),
          default=RecordStatus.ACTIVE,
          nullable=False,
     )

     # Relationships
     visits = relationship("Visit", back_populates="visitor")

     def __repr__(self):
          return f"<Visitor(id={self.id}, id_number='{self.id_number}')>"
