"""Streamlit Web UI for job-post-studio.

Create a job post from a short form, refine it by chat, translate it to
English and generate images from an uploaded template.
"""

from __future__ import annotations

import asyncio
import logging

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

from job_post_studio.clients.job_service_client import JobServiceClient
from job_post_studio.config import load_config
from job_post_studio.exceptions import UserPreconditionError
from job_post_studio.export.images import decode_image, image_filename
from job_post_studio.localization import t
from job_post_studio.models.form import Attachment, JobPostForm
from job_post_studio.models.job import Job
from job_post_studio.models.lifecycle import RequestStatus
from job_post_studio.pipeline.lifecycle import RequestLifecycle
from job_post_studio.pipeline.session import SessionStore

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Job Post Studio",
    page_icon=":briefcase:",
    layout="wide",
)

config = load_config()

if "store" not in st.session_state:
    st.session_state.store = SessionStore(
        JobServiceClient(config.service),
        language=config.ui.default_language,
    )

store: SessionStore = st.session_state.store

# ---------------------------------------------------------------------------
# Sidebar — language toggle and reset
# ---------------------------------------------------------------------------

with st.sidebar:
    st.title("Job Post Studio")

    language = st.radio(
        "Language / Sprache",
        ["Deutsch", "English"],
        index=0 if store.language == "de" else 1,
        horizontal=True,
    )
    lang = "de" if language == "Deutsch" else "en"
    store.language = lang
    is_en = lang == "en"

    st.divider()

    if st.button("Reset" if is_en else "Zurücksetzen"):
        store.reset()
        for key in ("flash", "chat_prompt"):
            st.session_state.pop(key, None)
        st.rerun()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _flash(key: str) -> None:
    st.session_state["flash"] = t(key, lang)


def _show_error(lifecycle: RequestLifecycle) -> None:
    if lifecycle.status is RequestStatus.FAILED and lifecycle.error:
        st.error(f"{t('error', lang)}: {lifecycle.error}")


def _render_list(label: str, items: list[str]) -> None:
    if items:
        st.markdown(f"**{label}**")
        st.markdown("\n".join(f"- {item}" for item in items))


def _render_job(job: Job) -> None:
    st.subheader(job.job_title)
    st.markdown(f"### {job.headline}")
    st.write(job.introduction)
    st.write(job.introduction_of_job)
    st.write(job.description)

    _render_list("Tasks" if is_en else "Aufgaben", job.tasks)
    _render_list("Qualifications" if is_en else "Qualifikationen", job.qualifications)
    _render_list("Benefits" if is_en else "Vorteile", job.benefits)

    st.markdown(f"**{job.personal_address}**")
    st.info(job.call_to_action)

    with st.expander("Voice", expanded=False):
        st.write(job.voice_script)
        st.caption(f"{job.voice_tone} | {job.voice_location}")
        st.write(job.voice_cta)
        st.write(job.voice_benefits)
        contact = job.contact_details
        st.markdown(
            f"- {contact.contact_person}\n- {contact.email}\n- {contact.phone}\n"
            f"- {contact.address}\n- {contact.website}"
        )

    with st.expander("Image copy" if is_en else "Bildtexte", expanded=False):
        st.markdown(f"**Keyword**: {job.image_keyword}")
        _render_list("Taglines", job.taglines)
        _render_list("Body copy", job.body_copy)
        st.markdown(f"{job.website} | {job.closing_date}")


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


def _section_create() -> None:
    st.header("Create job post" if is_en else "Job-Post erstellen")

    with st.form("create_job"):
        col1, col2 = st.columns(2)
        with col1:
            company_name = st.text_input("Company" if is_en else "Unternehmen", max_chars=100)
            job_title = st.text_input("Job title" if is_en else "Berufsbezeichnung", max_chars=100)
            location = st.text_input("Location" if is_en else "Standort", max_chars=100)
        with col2:
            website = st.text_input("Website", max_chars=200)
            closing_date = st.text_input("Closing date" if is_en else "Bewerbungsschluss", max_chars=50)
            attachment = st.file_uploader(
                "Attachment (optional)" if is_en else "Anhang (optional)",
                type=["pdf", "docx", "txt"],
            )
        job_description = st.text_area(
            "Job description" if is_en else "Stellenbeschreibung",
            height=150,
            max_chars=10000,
        )
        submitted = st.form_submit_button(
            "Create" if is_en else "Erstellen",
            type="primary",
            disabled=store.creation.is_loading,
        )

    if submitted:
        if not company_name or not job_title:
            st.warning("Company and job title are required" if is_en else "Unternehmen und Berufsbezeichnung sind erforderlich")
            return
        if attachment and attachment.size > config.ui.max_upload_bytes:
            st.error(f"Max {config.ui.max_upload_mb} MB")
            return

        form = JobPostForm(
            company_name=company_name,
            job_title=job_title,
            job_description=job_description,
            location=location,
            website=website,
            closing_date=closing_date,
            language=lang,
            attachment=(
                Attachment(
                    filename=attachment.name,
                    content=attachment.getvalue(),
                    content_type=attachment.type or "application/octet-stream",
                )
                if attachment
                else None
            ),
        )
        with st.spinner("Creating..." if is_en else "Wird erstellt..."):
            job = asyncio.run(store.create_job(form))
        if job is not None:
            _flash("job_created")

    _show_error(store.creation)


# ---------------------------------------------------------------------------
# Chat refinement
# ---------------------------------------------------------------------------


def _section_chat() -> None:
    st.header("Chat")
    prompt = st.text_input(
        "Prompt",
        key="chat_prompt",
        placeholder="Enter your request" if is_en else "Geben Sie Ihre Anfrage ein",
        help=(
            "Please prompt for additional details that you would like to amend!"
            if is_en
            else "Bitte geben Sie weitere Details an, die Sie ändern möchten!"
        ),
    )
    if st.button(
        "Submit" if is_en else "Einreichen",
        key="btn_chat",
        disabled=store.refinement.is_loading,
    ):
        try:
            with st.spinner("Processing..." if is_en else "Verarbeitung..."):
                job = asyncio.run(store.refine_job(prompt))
        except UserPreconditionError as e:
            st.warning(str(e))
            return
        if job is not None:
            _flash("job_updated")
            st.rerun()

    _show_error(store.refinement)


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------


def _section_translate() -> None:
    st.header("English version" if is_en else "Englische Version")
    if st.button(
        "Translate to English" if is_en else "Ins Englische übersetzen",
        disabled=store.translation.is_loading,
    ):
        try:
            with st.spinner("Translating..." if is_en else "Übersetzung läuft..."):
                translated = asyncio.run(store.translate_to_english())
        except UserPreconditionError as e:
            st.warning(str(e))
            return
        if translated is not None:
            _flash("translated")

    _show_error(store.translation)

    if store.translated_job:
        if store.is_translated:
            st.caption("Translated job data" if is_en else "Übersetzte Job-Daten")
        else:
            st.caption(
                "Current job data, not translated yet" if is_en
                else "Aktuelle Job-Daten, noch nicht übersetzt"
            )
        st.json(store.translated_job, expanded=False)


# ---------------------------------------------------------------------------
# Image generation
# ---------------------------------------------------------------------------


def _section_images() -> None:
    st.header("Generate images" if is_en else "Bilder generieren")
    template = st.file_uploader(
        "Upload template file" if is_en else "Vorlagendatei hochladen",
        type=["jpg", "png", "jpeg", "svg", "webp"],
    )
    if template and template.size > config.ui.max_upload_bytes:
        st.error(f"Max {config.ui.max_upload_mb} MB")
        return

    if st.button(
        "Generate" if is_en else "Generieren",
        disabled=store.images.is_loading,
    ):
        try:
            with st.spinner("Generating..." if is_en else "Wird generiert..."):
                result = asyncio.run(
                    store.generate_images(
                        template.getvalue() if template else None,
                        template.name if template else "template.png",
                        (template.type if template else None) or "image/png",
                    )
                )
        except UserPreconditionError as e:
            st.warning(str(e))
            return
        if result:
            _flash("images_generated")

    _show_error(store.images)

    images = store.images.result or []
    if images:
        cols = st.columns(4)
        for i, b64_data in enumerate(images):
            try:
                data = decode_image(b64_data)
            except ValueError:
                logger.exception("Could not decode generated image %d", i)
                continue
            with cols[i % 4]:
                st.image(data, caption=f"#{i + 1}")
                st.download_button(
                    label="Download",
                    data=data,
                    file_name=image_filename(i),
                    mime="image/png",
                    key=f"dl_image_{i}",
                )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

flash = st.session_state.pop("flash", None)
if flash:
    st.success(flash)

tab_create, tab_job = st.tabs(
    ["Create" if is_en else "Erstellen", "Job post" if is_en else "Job-Post"]
)

with tab_create:
    _section_create()

with tab_job:
    if store.job is None:
        st.info(t("create_job_first", lang))
    else:
        _render_job(store.job)
        st.divider()
        _section_chat()
        st.divider()
        _section_translate()
        st.divider()
        _section_images()
