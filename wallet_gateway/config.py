"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from wallet_gateway.domain.models import FeeSchedule, FeeTier


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "wallet-gateway"
    log_level: str = "INFO"
    locale: str = "en"

    # Transfer fee tiers (rate is a percentage, fees in cents)
    instant_transfer_rate: float = 1.5
    instant_transfer_minimum_fee: int = 25
    ach_transfer_rate: float = 0.0
    ach_transfer_minimum_fee: int = 0

    def fee_schedule(self) -> FeeSchedule:
        """Build the transfer fee schedule from configured tiers"""
        return FeeSchedule(
            instant=FeeTier(rate=self.instant_transfer_rate, minimum_fee=self.instant_transfer_minimum_fee),
            ach=FeeTier(rate=self.ach_transfer_rate, minimum_fee=self.ach_transfer_minimum_fee),
        )


settings = Settings()
