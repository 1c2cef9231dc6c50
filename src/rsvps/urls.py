SUBMIT_RSVP_URL = "/rsvp"
LIST_RSVPS_URL = "/admin/rsvps"
RSVP_SUMMARY_URL = "/admin/rsvps/summary"
