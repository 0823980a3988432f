class _SystemCore:
    ENDPOINT = "/system"
    INBOUNDS_ENDPOINT = "/inbounds"
    HOSTS_ENDPOINT = "/hosts"
