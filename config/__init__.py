import os

def get_settings_module() -> str:
    # Environment comes from APP_ENV, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"
    
    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"
    
    # 3. Anything else is development
    return "config.development"
