from collections import Counter

from src.rsvp.dtos import RSVPSummaryDTO, StoredRSVP


def latest_per_guest(rsvps: list[StoredRSVP]) -> list[StoredRSVP]:
    """Keep only the most recent RSVP of each email address, in first-seen order."""
    latest: dict[str, StoredRSVP] = {}
    for rsvp in rsvps:
        latest[rsvp.email.lower()] = rsvp
    return list(latest.values())


def summarize(rsvps: list[StoredRSVP]) -> RSVPSummaryDTO:
    guests = latest_per_guest(rsvps)
    attending = [rsvp for rsvp in guests if rsvp.attending]
    diets = Counter((rsvp.diet or "unspecified").lower() for rsvp in attending)

    return RSVPSummaryDTO(
        total_submissions=len(rsvps),
        guests=len(guests),
        attending=len(attending),
        declining=len(guests) - len(attending),
        diets=dict(diets),
    )
