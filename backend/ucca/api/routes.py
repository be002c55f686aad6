import itertools
import logging
from collections import Counter

from fastapi import APIRouter, HTTPException

from ucca import config
from ucca.api.serializers import serialize_ucca
from ucca.assembly import build_authority, build_interchangeable, label_for
from ucca.engine import UCCAIdentificationAlgorithm, split_into_teams
from ucca.ir.errors import ValidationError
from ucca.ir.validation import ValidationResult
from ucca.schemas import (
    EnumerateRequest,
    EnumerateResponse,
    TeamResult,
    ValidateRequest,
)
from ucca.validation import validate_authority

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/ucca/validate")
def validate(request: ValidateRequest):
    try:
        authority = build_authority(request.controllers, request.control_actions)
    except ValidationError as exc:
        return ValidationResult.failure(exc.issues).to_dict()
    return validate_authority(authority).to_dict()


@router.post("/ucca/enumerate", response_model=EnumerateResponse)
def enumerate_uccas(request: EnumerateRequest):
    try:
        authority = build_authority(request.controllers, request.control_actions)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail={"status": "invalid", "errors": exc.messages},
        ) from exc
    interchangeable = build_interchangeable(request.interchangeable)
    limit = request.limit if request.limit is not None else config.UCCA_MAX_RESULTS

    # Validate the whole tuple first: splitting into teams drops orphan actions
    result = validate_authority(authority)
    if not result.is_valid:
        raise HTTPException(
            status_code=422,
            detail={"status": "invalid", "errors": [issue.message for issue in result.errors]},
        )

    authorities = split_into_teams(authority) if request.split_teams else [authority]

    teams = []
    for team_authority in authorities:
        algorithm = UCCAIdentificationAlgorithm(team_authority, interchangeable)

        uccas = algorithm.iter_combinations()
        if limit:
            # one extra to detect truncation
            uccas = itertools.islice(uccas, limit + 1)
        records = [serialize_ucca(ucca) for ucca in uccas]
        truncated = bool(limit) and len(records) > limit
        if truncated:
            records = records[:limit]

        counts = Counter(record["type"] for record in records)

        teams.append(TeamResult(
            controllers=[str(c) for c in team_authority.controllers],
            uccas=records,
            counts=dict(counts),
            truncated=truncated,
        ))

    logger.info(
        "Enumerated %d UCCA(s) across %d team(s)",
        sum(len(team.uccas) for team in teams),
        len(teams),
    )

    return EnumerateResponse(
        status="success",
        teams=teams,
        labels={record.id: label_for(record) for record in request.control_actions},
    )
