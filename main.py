"""
Contact Relay API
Receives contact form submissions and forwards an acknowledgment email through Resend
"""
import asyncio
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from config import Settings, load_settings
from contact_page import render_contact_page
from mailer import ContactForm, EmailSender, ResendMailer, build_contact_email, serialize_error

SEND_EMAIL_PATH = "/api/sendEmail"


def create_app(settings: Optional[Settings] = None, mailer: Optional[EmailSender] = None) -> FastAPI:
    settings = settings or load_settings()
    mailer = mailer or ResendMailer(settings.resend_api_key)

    app = FastAPI(title="Contact Relay API")
    app.state.settings = settings
    app.state.mailer = mailer

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # --- Pages ---
    @app.get("/", response_class=HTMLResponse)
    async def contact_page():
        return render_contact_page(SEND_EMAIL_PATH)

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "provider": "configured" if settings.resend_api_key else "missing_api_key",
        }

    # ==================== CONTACT FORM ENDPOINT ====================

    @app.post(SEND_EMAIL_PATH)
    async def send_email(request: Request):
        """
        📧 SEND CONTACT ACKNOWLEDGMENT
        Emails the submitter a confirmation with their message quoted back
        """
        try:
            body = await request.json()
            contact = ContactForm(**body)
            message = build_contact_email(contact, settings.sender_email, settings.signature)

            user_mail = await asyncio.to_thread(mailer.send, message)

            return JSONResponse({"success": True, "userMail": user_mail}, status_code=200)

        except Exception as e:
            print(f"❌ Error sending email: {e}")
            return JSONResponse({"success": False, "error": serialize_error(e)}, status_code=500)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = app.state.settings
    print("🚀 Starting Contact Relay API...")
    print(f"📧 Resend: {'CONFIGURED' if settings.resend_api_key else 'MISSING API KEY'}")
    print(f"🌐 Server: http://{settings.host}:{settings.port}")
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level="info"
    )
