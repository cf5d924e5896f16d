"""
Service module for period and symptom records.

Wraps the ``cycles/`` endpoints used to log period start and end events,
record symptoms and read the current cycle status.

Typical usage:
    cycles = CycleService(api)
    cycles.create_period_start_event()
    records = cycles.list_period_records()
"""
from typing import List, Optional
from datetime import date, datetime

from aws_lambda_powertools import Logger

from src.models.api import ApiResponse
from src.models.cycle import PeriodEventType, PeriodRecord, Symptom, SymptomOccurrence
from src.utils.api import ApiClient
from src.utils.middleware import require_session

logger = Logger()

class CycleService:
    """Period and symptom endpoints."""

    BASE_PATH = "cycles/"
    PERIODS_URL = f"{BASE_PATH}periods/"
    SYMPTOMS_URL = f"{BASE_PATH}symptoms/"
    CURRENT_STATUS_URL = f"{BASE_PATH}current-status/"

    def __init__(self, api: ApiClient):
        self.api = api

    @require_session
    def get_period_records(self) -> ApiResponse:
        return self.api.get(self.PERIODS_URL)

    def list_period_records(self) -> List[PeriodRecord]:
        """
        Get logged periods as models.

        Returns:
            List of PeriodRecord, empty if the request failed
        """
        response = self.get_period_records()
        if not response.success or not response.data:
            return []
        return [PeriodRecord(**record) for record in response.data]

    @require_session
    def create_period_start_event(self, date_time: Optional[datetime] = None) -> ApiResponse:
        """Log the start of a period, now if no time is given."""
        return self._create_period_event(PeriodEventType.START, date_time)

    @require_session
    def create_period_end_event(self, date_time: Optional[datetime] = None) -> ApiResponse:
        """Log the end of the active period, now if no time is given."""
        return self._create_period_event(PeriodEventType.END, date_time)

    @require_session
    def get_period_record_details(self, period_record_id: str) -> ApiResponse:
        return self.api.get(self.PERIODS_URL, {"periodRecordId": period_record_id})

    @require_session
    def get_symptoms(
        self,
        symptom_occurrence: Optional[SymptomOccurrence] = None,
        page: Optional[int] = None,
        rows_per_page: Optional[int] = None,
        start_datetime: Optional[datetime] = None,
        end_datetime: Optional[datetime] = None
    ) -> ApiResponse:
        """
        List logged symptoms.

        Args:
            symptom_occurrence: Restrict to period days or non-cycle days
            page: Page number
            rows_per_page: Page size
            start_datetime: Earliest symptom time
            end_datetime: Latest symptom time

        Returns:
            ApiResponse with the symptom page
        """
        params = {
            # The API spells this parameter with a single "r"
            "symptomOccurence": int(symptom_occurrence) if symptom_occurrence is not None else None,
            "page": page,
            "rowsPerPage": rows_per_page,
            "startDatetime": start_datetime.isoformat() if start_datetime else None,
            "endDatetime": end_datetime.isoformat() if end_datetime else None
        }
        return self.api.get(self.SYMPTOMS_URL, params)

    def list_symptoms(self, **filters) -> List[Symptom]:
        """Get symptoms as models, empty if the request failed."""
        response = self.get_symptoms(**filters)
        if not response.success or not response.data:
            return []
        return [Symptom(**symptom) for symptom in response.data]

    @require_session
    def create_symptom(
        self,
        severity: int,
        symptom_date: date,
        symptom: Optional[str] = None,
        comments: Optional[str] = None
    ) -> ApiResponse:
        """
        Log a symptom.

        Raises:
            ValueError: If severity is outside 0-5
        """
        if not 0 <= severity <= 5:
            raise ValueError(f"Severity must be between 0 and 5, got {severity}")

        return self.api.post(self.SYMPTOMS_URL, {
            "symptom": symptom,
            "comments": comments,
            "severity": severity,
            "date": symptom_date.isoformat()
        })

    @require_session
    def get_current_status(self) -> ApiResponse:
        return self.api.get(self.CURRENT_STATUS_URL)

    def _create_period_event(
        self,
        event_type: PeriodEventType,
        date_time: Optional[datetime]
    ) -> ApiResponse:
        response = self.api.post(self.PERIODS_URL, {
            "event": event_type.value,
            "dateTime": date_time.isoformat() if date_time else None
        })
        logger.info("Period event logged", extra={
            "event": event_type.name,
            "success": response.success
        })
        return response
