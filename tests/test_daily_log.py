"""
Tests for the daily log service.
"""
from datetime import date

import pytest

from src.models.daily_log import DailyLogInput
from src.services.daily_log import DailyLogService
from src.services.exceptions import ProfileNotFoundError

def test_create_log_derives_display_cycle_day(mock_dynamo, pcos_profile):
    data = DailyLogInput(date=date(2024, 1, 20), symptoms=["Cramps"], energy_level=4)

    log = DailyLogService(mock_dynamo).create_log("user-123", data, pcos_profile)

    assert log.cycle_day == 20
    assert log.user_id == "user-123"
    item = mock_dynamo.put_item.call_args[0][0]
    assert item["PK"] == "USER#user-123"
    assert item["SK"] == f"LOG#2024-01-20#{log.log_id}"
    assert item["date"] == "2024-01-20"
    assert item["symptoms"] == ["Cramps"]

def test_create_log_keeps_submitted_cycle_day(mock_dynamo):
    data = DailyLogInput(date=date(2024, 1, 20), cycle_day=3)

    log = DailyLogService(mock_dynamo).create_log("user-123", data)

    assert log.cycle_day == 3

def test_create_log_without_cycle_day_or_profile(mock_dynamo):
    data = DailyLogInput(date=date(2024, 1, 20))

    with pytest.raises(ProfileNotFoundError):
        DailyLogService(mock_dynamo).create_log("user-123", data)
    mock_dynamo.put_item.assert_not_called()

def test_list_logs_newest_first(mock_dynamo):
    mock_dynamo.query_items.return_value = [
        {"PK": "USER#user-123", "SK": "LOG#2024-01-02#b", "log_id": "b", "user_id": "user-123",
         "date": "2024-01-02", "cycle_day": 2, "symptoms": []},
        {"PK": "USER#user-123", "SK": "LOG#2024-01-05#a", "log_id": "a", "user_id": "user-123",
         "date": "2024-01-05", "cycle_day": 5, "symptoms": ["Bloating"], "mood": "Calm"},
    ]

    logs = DailyLogService(mock_dynamo).list_logs("user-123")

    mock_dynamo.query_items.assert_called_once_with(
        partition_key="PK",
        partition_value="USER#user-123",
        sort_key_prefix="LOG#",
        newest_first=True
    )
    assert [log.log_id for log in logs] == ["a", "b"]
    assert logs[0].mood == "Calm"

def test_energy_level_bounds():
    with pytest.raises(ValueError):
        DailyLogInput(date=date(2024, 1, 1), energy_level=11)
