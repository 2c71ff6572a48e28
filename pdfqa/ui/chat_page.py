"""NiceGUI chat interface for uploading PDFs and asking questions."""

import logging

from nicegui import events, ui

from pdfqa.client.backend import BackendClient
from pdfqa.config import get_client_config
from pdfqa.models.schemas import BotTurn, ConversationTurn, FileHandle
from pdfqa.session.controller import InteractionController
from pdfqa.ui.formatting import format_sources, status_text

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<style>
    .sidebar { background: white; border-right: 1px solid #e2e8f0; }

    .message-user {
        background: #3b82f6;
        color: white;
        border-radius: 12px 12px 0 12px;
    }

    .message-bot {
        background: #f8fafc;
        color: #334155;
        border-radius: 12px 12px 12px 0;
    }

    .message-error { border-left: 3px solid #ef4444; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each browser tab gets its own session."""
    ui.add_head_html(CUSTOM_CSS)
    config = get_client_config()
    controller = InteractionController(BackendClient(config.api_base_url))
    state = controller.state

    scroll_area: ui.scroll_area
    input_field: ui.input
    ask_btn: ui.button
    upload: ui.upload

    def render_turn(turn: ConversationTurn) -> None:
        is_user = turn.role == "user"
        align = "items-end" if is_user else "items-start"
        bubble = "message-user" if is_user else "message-bot"
        if isinstance(turn, BotTurn) and turn.is_error:
            bubble += " message-error"

        with ui.column().classes(f"w-full gap-1 {align}"):
            with ui.element("div").classes(f"px-4 py-3 max-w-[80%] {bubble}"):
                ui.label(turn.content).classes("text-sm leading-relaxed whitespace-pre-wrap")
                if isinstance(turn, BotTurn) and (sources := format_sources(turn.sources)):
                    ui.label(sources).classes("block mt-2 text-xs text-gray-500")

    @ui.refreshable
    def messages() -> None:
        if not len(state.transcript) and not controller.busy:
            with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                ui.icon("forum").classes("text-5xl text-gray-300")
                ui.label("Upload PDFs, then ask a question").classes("text-lg text-gray-400")
            return
        for turn in state.transcript:
            render_turn(turn)
        if controller.busy:
            with ui.row().classes("items-center gap-2 self-start"):
                ui.spinner(size="sm")
                ui.label(status_text(controller.phase)).classes("text-sm text-gray-500")

    @ui.refreshable
    def sidebar_status() -> None:
        if controller.last_error:
            ui.label(controller.last_error).classes("text-sm text-red-600")
        if controller.files:
            ui.label("Uploaded Files:").classes("text-sm text-gray-500 mt-2")
            for record in controller.files:
                ui.label(record.name).classes("text-sm text-gray-700")

    def sync_controls() -> None:
        upload.set_enabled(controller.can_upload)
        input_field.set_enabled(not controller.busy and bool(controller.files))
        ask_btn.set_enabled(controller.can_submit)
        if input_field.value != controller.pending_input:
            input_field.value = controller.pending_input

    def on_session_changed() -> None:
        sidebar_status.refresh()
        messages.refresh()
        sync_controls()

    def on_transcript_changed() -> None:
        messages.refresh()
        scroll_area.scroll_to(percent=1.0)

    async def handle_upload(e: events.MultiUploadEventArguments) -> None:
        batch = [
            FileHandle(name=f.name, content=await f.read(), content_type=f.content_type)
            for f in e.files
        ]
        upload.reset()
        logger.info(f"Picked {len(batch)} file(s) for upload")
        result = await controller.upload(batch)
        if result is not None and result.error:
            ui.notify(result.error, type="negative")

    async def send_question() -> None:
        if not controller.can_submit:
            return
        turn = await controller.submit()
        if turn is not None and turn.is_error:
            ui.notify(turn.content, type="negative")

    def clear_chat() -> None:
        controller.clear()

    # === UI Layout ===
    with ui.row().classes("w-full h-screen no-wrap gap-0"):
        # Sidebar
        with ui.column().classes("sidebar w-[300px] h-full p-6 gap-4"):
            ui.label(config.title).classes("text-lg font-semibold text-slate-700")
            upload = (
                ui.upload(
                    label="Upload PDFs",
                    multiple=True,
                    auto_upload=True,
                    on_multi_upload=handle_upload,
                )
                .props(f'accept="{config.upload_accept}" flat bordered')
                .classes("w-full")
            )
            ui.button("Clear Chat", icon="clear", on_click=clear_chat).props("outline no-caps")
            sidebar_status()

        # Chat area
        with ui.column().classes("flex-grow h-full p-6"):
            with ui.column().classes("w-full h-full bg-white rounded-xl border p-2"):
                scroll_area = ui.scroll_area().classes("flex-grow w-full")
                with scroll_area, ui.column().classes("w-full gap-4 p-2"):
                    messages()

                with ui.row().classes("w-full p-2 gap-2 items-center border-t no-wrap"):
                    input_field = (
                        ui.input(
                            placeholder="Ask a question...",
                            on_change=lambda e: controller.set_pending_input(e.value),
                        )
                        .props("outlined dense")
                        .classes("flex-grow")
                        .on("keydown.enter", send_question)
                    )
                    ask_btn = ui.button("Ask", on_click=send_question).props("unelevated no-caps")

    state.changed.connect(on_session_changed)
    state.transcript.changed.connect(on_transcript_changed)
    sync_controls()
