"""English/German user-facing copy."""

from __future__ import annotations

LANGUAGES = ("en", "de")

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "create_job_first": "Please create a job post first!",
        "empty_prompt": "Please enter a request first.",
        "template_required": "Template file and job image keyword are required",
        "job_updated": "Job post updated successfully!",
        "job_created": "Job post created.",
        "translated": "Job post translated to English.",
        "images_generated": "Images generated.",
        "reset_done": "Session reset.",
        "error": "Error",
    },
    "de": {
        "create_job_first": "Bitte erstellen Sie zuerst einen Job-Post!",
        "empty_prompt": "Bitte geben Sie zuerst eine Anfrage ein.",
        "template_required": "Vorlagendatei und Bild-Stichwort des Jobs sind erforderlich",
        "job_updated": "Job-Post erfolgreich aktualisiert!",
        "job_created": "Job-Post erstellt.",
        "translated": "Job-Post ins Englische übersetzt.",
        "images_generated": "Bilder generiert.",
        "reset_done": "Sitzung zurückgesetzt.",
        "error": "Fehler",
    },
}


def t(key: str, lang: str = "en") -> str:
    """Look up ``key`` in ``lang``, falling back to English, then to the key."""
    table = MESSAGES.get(lang, MESSAGES["en"])
    return table.get(key) or MESSAGES["en"].get(key, key)
