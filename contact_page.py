"""
Contact page served at GET /
Plain HTML with an inline script, no build step
"""


def render_contact_page(endpoint: str = "/api/sendEmail") -> str:
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>Get in Touch</title>
    </head>
    <body style="margin: 0; min-height: 100vh; display: flex; align-items: center; justify-content: center; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif; background: linear-gradient(135deg, #eff6ff 0%, #ffffff 50%, #dbeafe 100%);">
        <div style="width: 100%; max-width: 512px; margin: 16px; padding: 48px; background-color: rgba(255, 255, 255, 0.6); border-radius: 24px; box-shadow: 0 25px 50px rgba(0, 0, 0, 0.15);">

            <!-- Header -->
            <h1 style="margin: 0 0 12px 0; font-size: 36px; font-weight: 800; color: #111827; text-align: center;">
                Get in <span style="color: #2563eb;">Touch</span>
            </h1>
            <p style="margin: 0 0 32px 0; color: #4b5563; text-align: center;">
                Have questions? Drop a message and we’ll get back to you.
            </p>

            <!-- Form -->
            <form id="contact-form" style="display: flex; flex-direction: column; gap: 24px;">
                <label style="display: flex; flex-direction: column; gap: 6px; font-size: 14px; color: #6b7280;">
                    Your Name
                    <input type="text" name="name" required style="padding: 12px 16px; border: 1px solid #d1d5db; border-radius: 12px; font-size: 16px;">
                </label>
                <label style="display: flex; flex-direction: column; gap: 6px; font-size: 14px; color: #6b7280;">
                    Your Email
                    <input type="email" name="email" required style="padding: 12px 16px; border: 1px solid #d1d5db; border-radius: 12px; font-size: 16px;">
                </label>
                <label style="display: flex; flex-direction: column; gap: 6px; font-size: 14px; color: #6b7280;">
                    Your Message
                    <textarea name="message" rows="4" required style="padding: 12px 16px; border: 1px solid #d1d5db; border-radius: 12px; font-size: 16px;"></textarea>
                </label>
                <button id="submit-button" type="submit" style="padding: 12px; border: none; border-radius: 12px; background: linear-gradient(90deg, #2563eb, #3b82f6); color: #ffffff; font-size: 16px; font-weight: 600; cursor: pointer;">
                    Send Message
                </button>
            </form>

            <!-- Status Message -->
            <p id="status" style="display: none; margin: 16px 0 0 0; font-size: 14px; font-weight: 500; text-align: center;"></p>
        </div>

        <script>
            const form = document.getElementById("contact-form");
            const button = document.getElementById("submit-button");
            const statusEl = document.getElementById("status");

            function setStatus(text) {{
                statusEl.textContent = text;
                statusEl.style.display = text ? "block" : "none";
                statusEl.style.color = text.includes("✅") ? "#16a34a" : text.includes("❌") ? "#dc2626" : "#4b5563";
            }}

            function setLoading(loading) {{
                button.disabled = loading;
                button.style.opacity = loading ? "0.7" : "1";
                button.textContent = loading ? "Sending..." : "Send Message";
            }}

            form.addEventListener("submit", async (e) => {{
                e.preventDefault();
                setStatus("");
                setLoading(true);

                const payload = {{
                    name: form.elements.name.value,
                    email: form.elements.email.value,
                    message: form.elements.message.value,
                }};

                try {{
                    const res = await fetch("{endpoint}", {{
                        method: "POST",
                        headers: {{ "Content-Type": "application/json" }},
                        body: JSON.stringify(payload),
                    }});
                    const data = await res.json();

                    if (data.success) {{
                        setStatus("✅ Email sent successfully!");
                        form.reset();
                    }} else {{
                        setStatus("❌ Failed to send email.");
                    }}
                }} catch (error) {{
                    setStatus("❌ Error sending email.");
                }} finally {{
                    setLoading(false);
                }}
            }});
        </script>
    </body>
    </html>
    """
