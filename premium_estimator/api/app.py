# premium_estimator/api/app.py
"""
FastAPI service for the Premium Estimator (thin API wrapper).

Endpoints:
- GET  /health
- GET  /rates/{product_id} -> rate table rows for one product
- POST /premium            -> premium breakdown (+ display strings)
- POST /premium/form       -> same, from raw form strings (+ warnings)
- POST /premium/batch      -> premiums over age/period ranges

The API layer stays thin:
- validates request shape
- calls premium_estimator.pricing
- maps PremiumError kinds to HTTP status codes
"""

from __future__ import annotations

from typing import Any, Dict, List, NoReturn, Optional, Union

import pandas as pd
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from premium_estimator.forms.runtime import build_request_from_form, is_form_complete
from premium_estimator.pricing.batch import batch_calculate_ranges
from premium_estimator.pricing.quote import ErrorKind, PremiumError, PremiumQuote, calculate, calculate_premium
from premium_estimator.pricing.rates import list_products, rate_table_frame
from premium_estimator.utils.config import configure_logging, get_settings
from premium_estimator.utils.formatting import display_fields

settings = get_settings()

app = FastAPI(title=settings.api_title, version="0.1.0")

ERROR_STATUS = {
    ErrorKind.INVALID_INPUT: 422,
    ErrorKind.RATE_NOT_FOUND: 404,
    ErrorKind.COMPUTATION_FAULT: 500,
}


@app.on_event("startup")
def _startup() -> None:
    configure_logging(settings.log_level)


# -----------------------------
# Schemas
# -----------------------------
class PremiumInput(BaseModel):
    product_id: Union[str, int]
    gender: str
    entry_age: float
    insurance_period: float
    insured_amount: float


class FormInput(BaseModel):
    # Raw form values as typed by the user
    product_id: Optional[str] = None
    gender: Optional[str] = None
    entry_age: Optional[str] = None
    insurance_period: Optional[str] = None
    insured_amount: Optional[str] = None


class BatchInput(BaseModel):
    product_id: Union[str, int]
    gender: str
    age_range: str = Field(..., examples=["0-5"])
    period_range: str = Field(..., examples=["10-12"])
    insured_amount: float


class PremiumResponse(BaseModel):
    annual_premium: float
    monthly_premium: float
    base_rate: float
    loading_rate: float
    total_rate: float
    insured_amount: float
    display: Dict[str, str]


class FormPremiumResponse(BaseModel):
    complete: bool
    premium: Optional[PremiumResponse] = None
    warnings: List[str] = Field(default_factory=list)


class BatchResponse(BaseModel):
    product_id: str
    gender: str
    insured_amount: float
    rows: List[Dict[str, Any]]


class RateTableResponse(BaseModel):
    product_id: str
    rows: List[Dict[str, Any]]


# -----------------------------
# Helpers
# -----------------------------
def _raise_for_error(err: PremiumError) -> NoReturn:
    raise HTTPException(
        status_code=ERROR_STATUS[err.error_kind],
        detail={"error_kind": err.error_kind.value, "message": err.message},
    )


def _premium_response(quote: PremiumQuote) -> PremiumResponse:
    payload = quote.to_dict()
    payload.pop("success")
    return PremiumResponse(
        **payload,
        display=display_fields(payload, settings.currency),
    )


def _records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    # NaN is not valid JSON
    return df.astype(object).where(df.notna(), None).to_dict(orient="records")


# -----------------------------
# Routes
# -----------------------------
@app.get("/health")
def health() -> Dict[str, Any]:
    return {"status": "ok", "products": list_products()}


@app.get("/rates/{product_id}", response_model=RateTableResponse)
def rates(product_id: str) -> RateTableResponse:
    try:
        df = rate_table_frame(product_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0]) from e
    return RateTableResponse(product_id=product_id, rows=_records(df))


@app.post("/premium", response_model=PremiumResponse)
def premium(req: PremiumInput) -> PremiumResponse:
    result = calculate_premium(
        req.product_id,
        req.gender,
        req.entry_age,
        req.insurance_period,
        req.insured_amount,
    )
    if isinstance(result, PremiumError):
        _raise_for_error(result)
    return _premium_response(result)


@app.post("/premium/form", response_model=FormPremiumResponse)
def premium_from_form(form: FormInput) -> FormPremiumResponse:
    built = build_request_from_form(form.model_dump())
    if not is_form_complete(built.request):
        return FormPremiumResponse(complete=False, warnings=built.warnings)

    result = calculate(built.request)
    if isinstance(result, PremiumError):
        _raise_for_error(result)
    return FormPremiumResponse(
        complete=True,
        premium=_premium_response(result),
        warnings=built.warnings,
    )


@app.post("/premium/batch", response_model=BatchResponse)
def premium_batch(req: BatchInput) -> BatchResponse:
    out = batch_calculate_ranges(
        req.product_id,
        req.gender,
        req.age_range,
        req.period_range,
        req.insured_amount,
    )
    if isinstance(out, PremiumError):
        _raise_for_error(out)

    return BatchResponse(
        product_id=str(req.product_id),
        gender=req.gender,
        insured_amount=req.insured_amount,
        rows=_records(out.to_frame()),
    )
