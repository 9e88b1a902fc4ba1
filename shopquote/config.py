from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COMPANY_NAME: str = "Taller de Impresión y Corte Láser"
    LOG_LEVEL: str = "INFO"

    # IVA applied to every pre-tax sale price
    TAX_RATE: float = 0.16

    # Laser defaults, seeded into the config store at startup
    CUTTING_RATE_PER_MINUTE: float = 8.0
    PROFIT_MARGIN: float = 0.50
    ASSEMBLY_COST_PER_PIECE: float = 0.0

    # Machine bed limits (cm)
    LASER_MAX_PIECE_WIDTH_CM: float = 120.0
    LASER_MAX_PIECE_HEIGHT_CM: float = 80.0

    class Config:
        env_file = ".env"


settings = Settings()
