from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    EN = "en"
    NL = "nl"


@dataclass(frozen=True)
class FormTexts:
    welcome_heading: str
    welcome_sub: str
    name_placeholder: str
    ok_button: str
    question_heading: str
    question_sub: str
    yes_value: str
    yes_label: str
    no_value: str
    no_label: str
    back_button: str
    send_button: str
    thanks_yes_heading: str
    thanks_yes_text: str
    thanks_no_heading: str
    thanks_no_text: str
    contact: str
    error_generic: str
    error_missing_answer: str


@dataclass
class PageTemplates:
    LAYOUT_HTML = """<!DOCTYPE html>
<html lang="{lang}">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{title}</title>
    <style>
        body {{ font-family: Inter, Arial, sans-serif; background: #fdf6f0; color: #333; margin: 0; }}
        .container {{ max-width: 640px; margin: 0 auto; padding: 40px 20px; }}
        .step-indicator {{ color: #b08968; font-size: 14px; margin-bottom: 20px; }}
        .main-question {{ font-size: 28px; margin: 0 0 10px; }}
        .sub-text {{ color: #666; }}
        .event-details p {{ margin: 4px 0; }}
        .name-input {{ width: 100%; font-size: 20px; padding: 10px 0; border: none; border-bottom: 2px solid #b08968; background: transparent; }}
        .option {{ display: block; border: 1px solid #ddd; border-radius: 8px; padding: 12px; margin: 10px 0; cursor: pointer; }}
        .navigation {{ display: flex; gap: 12px; margin-top: 30px; }}
        .continue-btn {{ background: #b08968; color: white; border: none; border-radius: 6px; padding: 12px 24px; font-size: 16px; }}
        .back-btn {{ background: transparent; border: 1px solid #b08968; border-radius: 6px; padding: 12px 24px; font-size: 16px; }}
        .error {{ color: #b00020; }}
        .stats {{ display: flex; gap: 16px; margin: 20px 0; }}
        .stat {{ flex: 1; background: white; border-radius: 8px; padding: 16px; text-align: center; }}
        .stat-value {{ font-size: 28px; font-weight: bold; }}
        .rsvp-list {{ list-style: none; padding: 0; }}
        .rsvp {{ background: white; border-left: 4px solid #ccc; border-radius: 6px; padding: 12px; margin: 8px 0; }}
        .rsvp.yes {{ border-left-color: #4caf50; }}
        .rsvp.no {{ border-left-color: #e57373; }}
        .rsvp-meta span {{ margin-right: 12px; color: #777; font-size: 13px; }}
        .badge {{ float: right; font-size: 13px; }}
        .muted {{ color: #999; }}
    </style>
</head>
<body>
    <main class="container">
{body}
    </main>
</body>
</html>
"""

    WELCOME_HTML = """
        <div class="step-indicator">1 &rarr; 3</div>
        <h1 class="main-question">{welcome_heading}</h1>
        <p class="sub-text">{welcome_sub}</p>
        <form method="post" action="/">
            <input type="hidden" name="step" value="welcome">
            <input type="hidden" name="response" value="{response}">
            <input type="text" name="name" value="{name}" placeholder="{name_placeholder}" class="name-input" required autofocus>
            <div class="navigation">
                <button type="submit" name="action" value="continue" class="continue-btn">{ok_button}</button>
            </div>
        </form>
"""

    QUESTION_HTML = """
        <div class="step-indicator">2 &rarr; 3</div>
        <h1 class="main-question">{question_heading}</h1>
        <h2 class="sub-text">{question_sub}</h2>
        <div class="event-details">
{event_details}
        </div>
        {error}
        <form method="post" action="/">
            <input type="hidden" name="step" value="question">
            <input type="hidden" name="name" value="{name}">
            <label class="option"><input type="radio" name="response" value="{yes_value}"{yes_checked}> {yes_label}</label>
            <label class="option"><input type="radio" name="response" value="{no_value}"{no_checked}> {no_label}</label>
            <div class="navigation">
                <button type="submit" name="action" value="back" class="back-btn" formnovalidate>{back_button}</button>
                <button type="submit" name="action" value="submit" class="continue-btn">{send_button}</button>
            </div>
        </form>
"""

    THANKS_HTML = """
        <div class="step-indicator">3 &rarr; 3</div>
        <h1 class="main-question">{heading}</h1>
        <p class="sub-text">{text}</p>
        <div class="final-message">
            {contact}
            <p class="signature">{host_names}</p>
        </div>
"""

    DASHBOARD_HTML = """
        <header>
            <h1>RSVP Admin</h1>
            <a href="/admin">Reload</a>
        </header>
        <section class="stats">
            <div class="stat"><div class="stat-label">Total</div><div class="stat-value">{total}</div></div>
            <div class="stat yes"><div class="stat-label">Yes</div><div class="stat-value">{yes}</div></div>
            <div class="stat no"><div class="stat-label">No</div><div class="stat-value">{no}</div></div>
        </section>
        <ul class="rsvp-list">
{rows}
        </ul>
"""

    DASHBOARD_ROW_HTML = """            <li class="rsvp {css_class}">
                <div class="rsvp-head"><strong class="name">{name}</strong><span class="badge">{badge}</span></div>
                <div class="rsvp-meta">{meta}</div>
                {message}
            </li>"""

    DASHBOARD_EMPTY_HTML = """            <li class="muted">No RSVPs yet.</li>"""

    DASHBOARD_ERROR_HTML = """
        <header>
            <h1>RSVP Admin</h1>
        </header>
        <p class="error">Error: {error}</p>
        <p><a href="/admin">Reload</a></p>
"""

    FORM_TEXTS = {
        Language.NL: FormTexts(
            welcome_heading="Hallo! Ik ben zo blij dat je er bent! &#10024;",
            welcome_sub="Voordat we beginnen, wat is je naam?",
            name_placeholder="Type je naam hier...",
            ok_button="OK &#10003;",
            question_heading="Hoi {name}! &#128075;",
            question_sub="Kom je op {event_title}?",
            yes_value="Ja",
            yes_label="Ja! Ik kom graag! &#127881;",
            no_value="Nee",
            no_label="Nee, helaas kan ik niet &#128532;",
            back_button="&larr; Terug",
            send_button="Verstuur &#10003;",
            thanks_yes_heading="Geweldig, {name}!",
            thanks_yes_text="We kunnen niet wachten om je te zien! Tot dan! &#128149;",
            thanks_no_heading="Bedankt, {name}!",
            thanks_no_text=(
                "Bedankt voor je eerlijke antwoord. We zullen je missen, "
                "maar we begrijpen het! &#128153;"
            ),
            contact="Voor vragen, bel: {phone}",
            error_generic="Er ging iets mis. Verstuur het nog een keer.",
            error_missing_answer="Kies eerst een antwoord.",
        ),
        Language.EN: FormTexts(
            welcome_heading="Hello! So glad you're here! &#10024;",
            welcome_sub="Before we start, what's your name?",
            name_placeholder="Type your name here...",
            ok_button="OK &#10003;",
            question_heading="Hi {name}! &#128075;",
            question_sub="Are you coming to {event_title}?",
            yes_value="Yes",
            yes_label="Yes! I'd love to come! &#127881;",
            no_value="No",
            no_label="No, unfortunately I can't make it &#128532;",
            back_button="&larr; Back",
            send_button="Send &#10003;",
            thanks_yes_heading="Wonderful, {name}!",
            thanks_yes_text="We can't wait to see you! See you then! &#128149;",
            thanks_no_heading="Thank you, {name}!",
            thanks_no_text=(
                "Thanks for letting us know. We'll miss you, "
                "but we understand! &#128153;"
            ),
            contact="Questions? Call: {phone}",
            error_generic="Something went wrong, please try again.",
            error_missing_answer="Please choose an answer first.",
        ),
    }

    @classmethod
    def get_form_texts(cls, language: Language | str) -> FormTexts:
        try:
            return cls.FORM_TEXTS[Language(language)]
        except ValueError:
            return cls.FORM_TEXTS[Language.EN]
