"""Integration tests against a FastAPI stand-in for the document Q&A backend.

Requests go through real multipart/JSON encoding and FastAPI routing via
httpx ASGITransport; only the document processing is faked.
"""

import pytest
import pytest_check as check
from fastapi import FastAPI, HTTPException, UploadFile
from httpx import ASGITransport
from pydantic import BaseModel

from pdfqa.client.backend import BackendClient
from pdfqa.models.schemas import BotTurn, SourceRef, UserTurn
from pdfqa.session.controller import InteractionController
from tests.conftest import pdf


class QueryIn(BaseModel):
    query: str


def create_backend() -> FastAPI:
    """Backend that accepts .pdf uploads and answers from the uploaded names."""
    app = FastAPI()
    app.state.documents = []

    @app.post("/upload/")
    async def upload(file: UploadFile) -> dict:
        content = await file.read()
        if not (file.filename or "").lower().endswith(".pdf"):
            raise HTTPException(status_code=400, detail="Only PDF files are accepted")
        if not content.startswith(b"%PDF"):
            raise HTTPException(status_code=400)
        app.state.documents.append(file.filename)
        return {"filename": file.filename, "size": len(content)}

    @app.post("/query/")
    async def query(body: QueryIn) -> dict:
        if not app.state.documents:
            raise HTTPException(status_code=404, detail="No documents uploaded")
        if "nothing" in body.query:
            return {"answer": "", "sources": []}
        return {
            "answer": f"Answer to {body.query.strip()}",
            "sources": [{"filename": name, "page": 1} for name in app.state.documents],
        }

    return app


@pytest.fixture
def backend_app() -> FastAPI:
    return create_backend()


@pytest.fixture
def controller(backend_app: FastAPI) -> InteractionController:
    client = BackendClient("http://test", transport=ASGITransport(app=backend_app))
    return InteractionController(client)


class TestUploadThenAsk:
    """End-to-end upload and question flow."""

    async def test_upload_and_query_round_trip(
        self, controller: InteractionController, backend_app: FastAPI
    ) -> None:
        """Uploaded files are cited in the answer."""
        result = await controller.upload([pdf("a.pdf"), pdf("b.pdf")])
        controller.set_pending_input("What is X?")
        turn = await controller.submit()

        assert result is not None
        check.equal(result.uploaded, ["a.pdf", "b.pdf"])
        check.equal(backend_app.state.documents, ["a.pdf", "b.pdf"])
        check.equal(
            controller.transcript,
            (
                UserTurn(content="What is X?"),
                BotTurn(
                    content="Answer to What is X?",
                    sources=[
                        SourceRef(filename="a.pdf", page=1),
                        SourceRef(filename="b.pdf", page=1),
                    ],
                ),
            ),
        )
        check.equal(turn, controller.transcript[-1])
        check.is_false(controller.busy)

    async def test_rejected_file_aborts_batch(
        self, controller: InteractionController, backend_app: FastAPI
    ) -> None:
        """The backend's rejection detail becomes the upload error."""
        result = await controller.upload([pdf("a.pdf"), pdf("notes.txt"), pdf("c.pdf")])

        assert result is not None
        check.equal([f.name for f in controller.files], ["a.pdf"])
        check.equal(backend_app.state.documents, ["a.pdf"])
        check.equal(result.skipped, ["c.pdf"])
        check.equal(controller.last_error, "Upload failed: Only PDF files are accepted")
        check.equal(controller.transcript, ())

    async def test_default_http_exception_detail_is_used(
        self, controller: InteractionController
    ) -> None:
        """FastAPI's default detail for a bare 400 is passed through."""
        broken = pdf("broken.pdf").model_copy(update={"content": b"not a pdf"})

        await controller.upload([broken])

        assert controller.last_error == "Upload failed: Bad Request"

    async def test_query_before_upload_reports_backend_detail(
        self, controller: InteractionController
    ) -> None:
        """Backend errors show up in the chat and as last_error."""
        await controller.submit("Anything?")

        message = "Query failed: No documents uploaded"
        check.equal(controller.last_error, message)
        check.equal(controller.transcript[-1], BotTurn(content=message))

    async def test_empty_answer_from_backend(self, controller: InteractionController) -> None:
        """An empty answer from a 200 response is a failure."""
        await controller.upload([pdf("a.pdf")])

        await controller.submit("tell me nothing")

        last = controller.transcript[-1]
        check.is_true(last.content.startswith("Query failed:"))
        check.equal(controller.last_error, "Query failed: No answer received from server")
