from shared.dal.users_catalog import USERS_CATALOG, USERS_LATENCY_SECONDS, get_users

__all__ = ["USERS_CATALOG", "USERS_LATENCY_SECONDS", "get_users"]
