from pydantic_settings import BaseSettings, SettingsConfigDict

class Ayarlar(BaseSettings):
    """
    Roster demosu için konfigürasyon ayarları.
    Ortam değişkenlerinden 'ROSTER_' önekiyle okur (örneğin ROSTER_LOG_SEVIYESI).
    """
    model_config = SettingsConfigDict(env_prefix='ROSTER_')

    LOG_SEVIYESI: str = "INFO"


ayarlar = Ayarlar()
