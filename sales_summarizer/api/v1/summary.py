"""POST /v1/summary - Sales summary endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from sales_summarizer.api.v1.schemas import SummaryRequest, SummaryResponse, ExampleResponse
from sales_summarizer.api.dependencies import get_request_id, get_settings
from sales_summarizer.config import Settings
from sales_summarizer.domain.statistics import summarize
from sales_summarizer.domain.sample_data import EXAMPLE_DATA
from sales_summarizer.domain.exceptions import (
    AnalysisError,
    EmptyInputError,
    InvalidNumberError,
    MalformedLineError,
)
from sales_summarizer.infrastructure.observability.metrics import record_summary
from sales_summarizer.infrastructure.observability.logging import log_summary
from sales_summarizer.utils.formatting import format_result

router = APIRouter()

ERROR_OUTCOMES = {
    EmptyInputError: "empty_input",
    MalformedLineError: "malformed_line",
    InvalidNumberError: "invalid_number",
}


@router.post("/summary", response_model=SummaryResponse)
def create_summary(
    request_body: SummaryRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Summarize pasted tab-separated sales data.

    Flow:
    1. Reject oversized input
    2. Parse, aggregate and derive statistics
    3. Attach display strings for every numeric field
    4. Return summary response

    Any parse error aborts the request with 422 and no partial result.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    if len(request_body.raw_text) > app_settings.max_input_chars:
        record_summary("too_large")
        raise HTTPException(
            status_code=413,
            detail=f"Input exceeds {app_settings.max_input_chars} characters",
        )

    try:
        result = summarize(request_body.raw_text, strict_numbers=app_settings.strict_numbers)

    except AnalysisError as e:
        record_summary(ERROR_OUTCOMES.get(type(e), "invalid_input"))
        logging.warning(f"Rejected input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        record_summary("error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_summary("ok", result.record_count)
    log_summary(request_id, "ok", result.record_count, duration_ms)

    return SummaryResponse.from_result(result, format_result(result))


@router.get("/summary/example", response_model=ExampleResponse)
def get_example():
    """
    Return the canonical example dataset.

    Returns:
        Tab-separated rows that POST /v1/summary accepts as-is
    """
    return ExampleResponse(raw_text=EXAMPLE_DATA)
