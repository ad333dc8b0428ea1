import os

from dotenv import load_dotenv

load_dotenv()


class Settings:

    # -------------------------
    # Registry API
    # -------------------------
    API_URL = os.getenv("BIOURB_API_URL", "http://localhost:3001")
    HTTP_TIMEOUT = float(os.getenv("BIOURB_HTTP_TIMEOUT", "10"))

    # -------------------------
    # Contact form (EmailJS)
    # -------------------------
    EMAILJS_URL = os.getenv("EMAILJS_URL", "https://api.emailjs.com/api/v1.0/email/send")
    EMAILJS_SERVICE_ID = os.getenv("EMAILJS_SERVICE_ID", "")
    EMAILJS_TEMPLATE_ID = os.getenv("EMAILJS_TEMPLATE_ID", "")
    EMAILJS_PUBLIC_KEY = os.getenv("EMAILJS_PUBLIC_KEY", "")
