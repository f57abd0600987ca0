#!/usr/bin/env python3
"""
Contact form client
Holds the form state the page works with and submits it to the relay endpoint
"""
import os
import sys

import requests
from dotenv import load_dotenv

load_dotenv()

API_BASE = os.getenv("CONTACT_API_BASE", "http://localhost:8000")

FIELDS = ("name", "email", "message")

SUCCESS_STATUS = "✅ Email sent successfully!"
FAILURE_STATUS = "❌ Failed to send email."
ERROR_STATUS = "❌ Error sending email."


class ContactFormClient:
    """
    Form values, status message and loading flag for one contact form

    `session` is anything with a requests-style post(url, json=...), so a
    FastAPI TestClient can stand in for the network.
    """

    def __init__(self, base_url: str = API_BASE, session=None, endpoint: str = "/api/sendEmail"):
        self.url = f"{base_url.rstrip('/')}{endpoint}"
        self.session = session or requests.Session()
        self.form = self._empty_form()
        self.status = ""
        self.loading = False

    @staticmethod
    def _empty_form() -> dict:
        return {field: "" for field in FIELDS}

    def handle_change(self, name: str, value: str):
        self.form = {**self.form, name: value}

    def submit(self) -> str:
        self.status = ""
        self.loading = True

        try:
            res = self.session.post(self.url, json=dict(self.form))
            data = res.json()

            if isinstance(data, dict) and data.get("success"):
                self.status = SUCCESS_STATUS
                self.form = self._empty_form()
            else:
                self.status = FAILURE_STATUS

        except Exception as e:
            print(f"❌ Contact form request failed: {e}")
            self.status = ERROR_STATUS
        finally:
            self.loading = False

        return self.status

    @property
    def status_tone(self) -> str:
        if "✅" in self.status:
            return "success"
        if "❌" in self.status:
            return "error"
        return "neutral"

    @property
    def submit_label(self) -> str:
        return "Sending..." if self.loading else "Send Message"


if __name__ == "__main__":
    client = ContactFormClient()
    print(f"📧 Contact form -> {client.url}")
    client.handle_change("name", input("Your Name: "))
    client.handle_change("email", input("Your Email: "))
    client.handle_change("message", input("Your Message: "))

    print(client.submit())
    sys.exit(0 if client.status_tone == "success" else 1)
