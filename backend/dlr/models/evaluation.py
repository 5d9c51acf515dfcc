from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from sqlalchemy.sql import func

from dlr.database import Base


class EvaluationRecord(Base):
    __tablename__ = "evaluation_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    evaluated_at = Column(DateTime, nullable=False, index=True)
    convection_model = Column(String(20), nullable=False)  # heuristic or split
    conductor_name = Column(String(50))

    # Inputs
    air_temp_c = Column(Float, nullable=False)
    wind_mean_ms = Column(Float, nullable=False)
    wind_gust_ms = Column(Float, nullable=False)
    irradiance_w_m2 = Column(Float, nullable=False)
    current_a = Column(Float, nullable=False)

    # Outputs
    effective_wind_ms = Column(Float)
    conductor_temp_c = Column(Float)
    ampacity_a = Column(Float)
    reference_ampacity_a = Column(Float)
    rating_pct = Column(Float)  # 0-300
    risk_level = Column(String(20))  # Normal, Elevated, Critical, Optimal
    icing = Column(String(20))
    snow = Column(String(20))
    sag_px = Column(Float)
    saturated = Column(Boolean, default=False)

    created_at = Column(DateTime, server_default=func.now())
