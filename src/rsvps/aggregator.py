"""Yes/no classification of stored RSVPs and the dashboard totals."""

from collections.abc import Iterable

from src.rsvps.dtos import Classification, RSVPRecord, RSVPSummaryDTO

YES_RESPONSES = frozenset({"ja", "yes", "y", "true", "1"})
NO_RESPONSES = frozenset({"nee", "no", "n", "false", "0"})


def classify_response(value: str | None) -> Classification:
    normalized = (value or "").strip().lower()
    if normalized in YES_RESPONSES:
        return Classification.YES
    if normalized in NO_RESPONSES:
        return Classification.NO
    return Classification.UNKNOWN


def classify(record: RSVPRecord) -> Classification:
    """
    Classify a record as yes, no or unknown.

    A boolean `attending` wins. Otherwise `response` is used, or `status`
    when the record has no response at all.
    """
    if isinstance(record.attending, bool):
        return Classification.YES if record.attending else Classification.NO

    return classify_response(record.response if record.response is not None else record.status)


def summarize(records: Iterable[RSVPRecord]) -> RSVPSummaryDTO:
    total = yes = no = 0
    for record in records:
        total += 1
        classification = classify(record)
        if classification == Classification.YES:
            yes += 1
        elif classification == Classification.NO:
            no += 1
    return RSVPSummaryDTO(total=total, yes=yes, no=no)
