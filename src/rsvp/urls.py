RSVP_URL = "/api/rsvp"
RSVP_ENV_CHECK_URL = "/api/rsvp/env-check"
