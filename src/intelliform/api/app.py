"""FastAPI application factory."""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from intelliform.api.chat_models import (
    ChatRequest,
    ChatResponse,
    DocumentResponse,
    FormSummaryResponse,
    GenerateDocumentRequest,
    SessionStatus,
)
from intelliform.app_logging import configure_logging
from intelliform.containers import AppContainer
from intelliform.domain.sessions import DocumentRef, Session
from intelliform.services.conversation import ResponsePayload
from intelliform.services.documents import SessionNotFoundError, SessionNotReadyError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        sweeper_task = asyncio.create_task(
            app.state.container.sweeper.run_forever()
        )
        yield
        sweeper_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper_task
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health(request: Request) -> dict[str, object]:
        """Simple health check endpoint."""
        state_container: AppContainer = request.app.state.container
        return {
            "status": "ok",
            "sessions": state_container.session_store.count(),
            "forms": len(state_container.registry),
        }

    @app.get("/api/forms")
    async def list_forms(request: Request) -> list[FormSummaryResponse]:
        """Return the forms the assistant can fill in."""
        state_container: AppContainer = request.app.state.container
        return [
            FormSummaryResponse(
                id=summary.id,
                name=summary.name,
                authority=summary.authority,
                field_count=summary.field_count,
            )
            for summary in state_container.registry.list()
        ]

    @app.post("/api/chat")
    async def chat(body: ChatRequest, request: Request) -> ChatResponse:
        """Handle one user message and return the next prompt."""
        state_container: AppContainer = request.app.state.container
        reply = await state_container.orchestrator.handle_message(
            body.session_id, body.text
        )
        logger.info(
            "Session %s: %s -> %s",
            reply.session.id,
            reply.payload.intent,
            reply.payload.state,
        )
        return _chat_response(reply.payload)

    @app.post("/api/generate-document")
    async def generate_document(
        body: GenerateDocumentRequest, request: Request
    ) -> DocumentResponse:
        """Render the document for a completed session."""
        state_container: AppContainer = request.app.state.container
        try:
            document = await state_container.document_service.generate(
                body.session_id
            )
        except SessionNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
            ) from exc
        except SessionNotReadyError as exc:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Session not ready for document generation",
            ) from exc
        except Exception as exc:
            logger.exception("Document generation failed for %s", body.session_id)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Document generation failed",
            ) from exc
        session = state_container.session_store.get(body.session_id)
        form_name = session.schema.name if session and session.schema else None
        return _document_response(document, form_name)

    @app.get("/api/sessions/{session_id}")
    async def session_status(session_id: str, request: Request) -> SessionStatus:
        """Return the current state of a session."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session_store.get(session_id)
        if session is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
            )
        return _session_status(session)

    return app


def _chat_response(payload: ResponsePayload) -> ChatResponse:
    return ChatResponse(
        session_id=payload.session_id,
        state=str(payload.state),
        intent=payload.intent,
        message=payload.message,
        completed=payload.completed,
        current_schema=payload.current_schema,
        form_name=payload.form_name,
        next_prompt=payload.next_prompt,
        progress=payload.progress,
        errors=list(payload.errors) or None,
        details=payload.details,
    )


def _document_response(
    document: DocumentRef, form_name: str | None = None
) -> DocumentResponse:
    return DocumentResponse(
        filename=document.filename,
        storage_ref=document.storage_ref,
        schema_id=document.schema_id,
        form_name=form_name,
        created_at=document.created_at,
    )


def _session_status(session: Session) -> SessionStatus:
    form_name = session.schema.name if session.schema else None
    return SessionStatus(
        session_id=session.id,
        state=str(session.state),
        current_schema=session.form_id,
        form_name=form_name,
        progress=session.progress(),
        answers=dict(session.answers),
        documents=[
            _document_response(document, form_name) for document in session.documents
        ],
        created_at=session.created_at,
        last_activity=session.last_activity,
    )
