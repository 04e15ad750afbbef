from content_api.settings import Settings

settings = Settings()
