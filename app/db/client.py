# py
from supabase import create_client, Client
from app.core.config import Settings


def create_supabase(settings: Settings) -> Client:
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
