import logging

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse

from src.blob_store import StoreListError, StoreWriteError
from src.config.settings import settings
from src.pages.form_state import (
    Back,
    ChooseResponse,
    EnterName,
    FormState,
    FormStep,
    Submitted,
    transition,
)
from src.pages.render import render_dashboard, render_dashboard_error, render_form
from src.pages.templates import PageTemplates
from src.rsvps.aggregator import summarize
from src.rsvps.dtos import ValidationError
from src.rsvps.features.list_rsvps.router import get_rsvp_read_model
from src.rsvps.features.submit_rsvp.router import get_rsvp_write_model
from src.rsvps.repository.read_models import RSVPReadModel
from src.rsvps.repository.write_models import RSVPWriteModel

logger = logging.getLogger(__name__)

router = APIRouter()

FORM_URL = "/"
DASHBOARD_URL = "/admin"


def _posted_step(value: str) -> FormStep:
    try:
        return FormStep(value)
    except ValueError:
        return FormStep.WELCOME


@router.get(FORM_URL, response_class=HTMLResponse)
async def rsvp_form() -> HTMLResponse:
    return HTMLResponse(render_form(FormState(), settings))


@router.post(FORM_URL, response_class=HTMLResponse)
async def rsvp_form_action(
    action: str = Form(""),
    step: str = Form(FormStep.WELCOME.value),
    name: str = Form(""),
    response: str = Form(""),
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> HTMLResponse:
    """
    Advance the guest form by one action.
    The form is stateless on the server: step, name and response travel in hidden fields.
    """
    state = FormState(step=_posted_step(step), name=name.strip(), response=response.strip())

    if action == "continue":
        state = transition(state, EnterName(name))
    elif action == "back":
        state = transition(state, Back())
    elif action == "submit":
        state = transition(state, ChooseResponse(response))
        if state.step != FormStep.QUESTION:
            return HTMLResponse(render_form(state, settings))

        texts = PageTemplates.get_form_texts(settings.PAGE_LANGUAGE)
        if not state.can_submit:
            return HTMLResponse(
                render_form(state, settings, error=texts.error_missing_answer), status_code=400
            )

        try:
            await write_model.submit_rsvp(name=state.name, response=state.response)
        except ValidationError:
            return HTMLResponse(
                render_form(state, settings, error=texts.error_missing_answer), status_code=400
            )
        except StoreWriteError as e:
            logger.exception(f"Error saving RSVP from form: {e}")
            return HTMLResponse(
                render_form(state, settings, error=texts.error_generic), status_code=500
            )

        state = transition(state, Submitted())

    return HTMLResponse(render_form(state, settings))


@router.get(DASHBOARD_URL, response_class=HTMLResponse)
async def rsvp_dashboard(
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> HTMLResponse:
    try:
        listing = await read_model.list_rsvps()
    except StoreListError as e:
        logger.exception(f"Error fetching RSVPs for dashboard: {e}")
        return HTMLResponse(render_dashboard_error("failed to fetch RSVPs"), status_code=500)

    return HTMLResponse(render_dashboard(listing.rsvps, summarize(listing.rsvps)))
