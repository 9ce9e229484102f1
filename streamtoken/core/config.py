from dynaconf import Dynaconf

settings = Dynaconf(
    envvar_prefix="HDNTS",
    settings_files=['settings.toml', '.secrets.toml'],
)

def get_settings() -> Dynaconf:
    return settings
