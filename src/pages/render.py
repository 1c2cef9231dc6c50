from html import escape
from typing import Protocol

from src.pages.form_state import FormState, FormStep
from src.pages.templates import PageTemplates
from src.rsvps.aggregator import classify, classify_response
from src.rsvps.dtos import Classification, RSVPRecord, RSVPSummaryDTO


class PageConfig(Protocol):
    PAGE_LANGUAGE: str
    event_title: str
    event_details: list[str]
    host_names: str
    contact_phone: str


def _page(title: str, body: str, lang: str = "en") -> str:
    return PageTemplates.LAYOUT_HTML.format(lang=escape(lang), title=escape(title), body=body)


def render_form(state: FormState, config: PageConfig, error: str | None = None) -> str:
    """Render the guest form at its current step."""
    texts = PageTemplates.get_form_texts(config.PAGE_LANGUAGE)
    name = escape(state.name)

    if state.step == FormStep.QUESTION:
        body = PageTemplates.QUESTION_HTML.format(
            question_heading=texts.question_heading.format(name=name),
            question_sub=texts.question_sub.format(event_title=escape(config.event_title)),
            event_details="\n".join(
                f"            <p>{escape(detail)}</p>" for detail in config.event_details
            ),
            error=f'<p class="error">{error}</p>' if error else "",
            name=name,
            yes_value=texts.yes_value,
            yes_label=texts.yes_label,
            yes_checked=" checked" if state.response == texts.yes_value else "",
            no_value=texts.no_value,
            no_label=texts.no_label,
            no_checked=" checked" if state.response == texts.no_value else "",
            back_button=texts.back_button,
            send_button=texts.send_button,
        )
    elif state.step == FormStep.THANKS:
        attending = classify_response(state.response) == Classification.YES
        heading = texts.thanks_yes_heading if attending else texts.thanks_no_heading
        text = texts.thanks_yes_text if attending else texts.thanks_no_text
        contact = ""
        if config.contact_phone:
            contact = f"<p>{texts.contact.format(phone=escape(config.contact_phone))}</p>"
        body = PageTemplates.THANKS_HTML.format(
            heading=heading.format(name=name),
            text=text,
            contact=contact,
            host_names=escape(config.host_names),
        )
    else:
        body = PageTemplates.WELCOME_HTML.format(
            welcome_heading=texts.welcome_heading,
            welcome_sub=texts.welcome_sub,
            name=name,
            name_placeholder=texts.name_placeholder,
            response=escape(state.response),
            ok_button=texts.ok_button,
        )

    return _page(f"RSVP - {config.event_title}", body, config.PAGE_LANGUAGE)


def _dashboard_row(record: RSVPRecord) -> str:
    classification = classify(record)
    if classification == Classification.YES:
        badge = "Yes"
    elif classification == Classification.NO:
        badge = "No"
    else:
        badge = escape(record.response or record.status or "—")

    meta = "".join(
        f"<span>{escape(value)}</span>"
        for value in (record.email, record.phone, record.timestamp)
        if value
    )

    return PageTemplates.DASHBOARD_ROW_HTML.format(
        css_class=classification.value,
        name=escape(record.name or "—"),
        badge=badge,
        meta=meta,
        message=f'<p class="note">{escape(record.message)}</p>' if record.message else "",
    )


def render_dashboard(records: list[RSVPRecord], summary: RSVPSummaryDTO) -> str:
    rows = "\n".join(_dashboard_row(record) for record in records)
    body = PageTemplates.DASHBOARD_HTML.format(
        total=summary.total,
        yes=summary.yes,
        no=summary.no,
        rows=rows or PageTemplates.DASHBOARD_EMPTY_HTML,
    )
    return _page("RSVP Admin", body)


def render_dashboard_error(error: str) -> str:
    return _page("RSVP Admin", PageTemplates.DASHBOARD_ERROR_HTML.format(error=escape(error)))
