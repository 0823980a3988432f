class _CoreCore:
    ENDPOINT = "/core"
    RESTART_ENDPOINT = "/core/restart"
    CONFIG_ENDPOINT = "/core/config"
