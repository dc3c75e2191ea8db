from sqlalchemy import Column, String, Integer, Float
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class AdmissionResultModel(Base):
    """
    Зачисленный абитуриент: (department, position) -> applicant, балл, раунд.
    """
    __tablename__ = "admission_results"

    department = Column(String, primary_key=True)
    position = Column(Integer, primary_key=True)  # 0 — лучший
    applicant_name = Column(String, nullable=False)
    score = Column(Float, nullable=False)
    round_index = Column(Integer, nullable=False)


class DepartmentSummaryModel(Base):
    __tablename__ = "department_summaries"

    department = Column(String, primary_key=True)
    capacity = Column(Integer, nullable=False)
    pool_size = Column(Integer, nullable=False)
    admitted_count = Column(Integer, nullable=False)
    passing_score = Column(Float, nullable=True)
