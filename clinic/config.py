"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Clinic settings class with environment variable validation.

    Attributes:
        database_url: SQLAlchemy connection string (PostgreSQL in production)
        sql_echo: Whether SQLAlchemy should echo emitted SQL
        log_level: Root logging level

        # Appointment settings
        scheduled_status: Status label given to newly scheduled appointments
        upcoming_window_days: Length of the upcoming appointments window in days
        upcoming_only_scheduled: Restrict the upcoming view to scheduled appointments

        # Startup settings
        seed_sample_data: Load the sample clinic data on startup
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CLINIC_",
        case_sensitive=False,
        extra="ignore",
    )

    # Database settings
    database_url: str = "sqlite:///./clinic.db"
    sql_echo: bool = False

    # Logging settings
    log_level: str = "INFO"

    # Appointment settings
    scheduled_status: str = "scheduled"
    upcoming_window_days: int = 7
    upcoming_only_scheduled: bool = False

    # Startup settings
    seed_sample_data: bool = False

# Create settings instance
settings = Settings()
