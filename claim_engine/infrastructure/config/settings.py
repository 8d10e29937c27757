from pydantic_settings import BaseSettings, SettingsConfigDict

from claim_engine.application.services.claim_policy import ClaimPolicy


class ClaimSettings(BaseSettings, ClaimPolicy):
    """
    The claim policy, loaded from environment variables (prefixed with CLAIMS_).
    Set-valued settings are given as JSON, e.g. CLAIMS_WORLDS_NO_CLAIMING='["world_nether"]'.
    """
    model_config = SettingsConfigDict(env_prefix='CLAIMS_', env_file='.env', extra='ignore')


class LoggingSettings(BaseSettings):
    """
    Settings for the file logger.
    Loads from environment variables (prefixed with LOG_).
    """
    model_config = SettingsConfigDict(env_prefix='LOG_', env_file='.env', extra='ignore')

    file: str = "claims.log"
    level: str = "INFO"
