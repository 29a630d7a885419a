"""
Daily log model for symptom, mood and energy tracking.
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field

class DailyLogInput(BaseModel):
    """
    Fields a user submits for a day. cycle_day is derived from the profile when omitted.
    """
    date: date
    cycle_day: Optional[int] = Field(None, ge=1)
    symptoms: List[str] = Field(default_factory=list)
    energy_level: Optional[int] = Field(None, ge=1, le=10)
    mood: Optional[str] = None
    notes: Optional[str] = None

class DailyLog(DailyLogInput):
    """
    Stored daily log entry.
    """
    log_id: str
    user_id: str
    cycle_day: int = Field(..., ge=1)  # 1-based display day

class VoiceLogRequest(BaseModel):
    """
    Transcribed voice note to be turned into log fields.
    """
    text: str = Field(..., min_length=1)
