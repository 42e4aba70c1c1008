from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    cors_origins: str = "*"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "legal_simplifier"
    db_username: str = "legal_simplifier"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    pdf_engine: str = "pdfplumber"
    max_upload_size_bytes: int = 20 * 1024 * 1024

    default_language: str = "en"
    language_min_length: int = 10

    translation_model_name: str = "facebook/nllb-200-distilled-600M"

    summarization_provider: str = "huggingface"
    summarization_chunk_size: int = 500
    summarization_max_new_tokens: int = 300
    summarization_temperature: float = 0.3

    huggingface_api_key: str = ""
    huggingface_api_url: str = "https://api-inference.huggingface.co/models"
    huggingface_model_name: str = "mistralai/Mistral-7B-Instruct-v0.2"
    huggingface_timeout_seconds: int = 600

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 600
    openai_compatible_base_url: str = ""

    dictionary_api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    dictionary_timeout_seconds: int = 10

    supabase_url: str = ""
    supabase_service_role_key: str = ""

    history_max_page_size: int = 50

    def cors_origin_list(self) -> list[str]:
        """Split the comma-separated CORS origins setting."""
        return [
            origin.strip().rstrip("/")
            for origin in self.cors_origins.split(",")
            if origin.strip()
        ]
