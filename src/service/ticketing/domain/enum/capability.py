from enum import StrEnum


class Capability(StrEnum):
    MANAGE_EVENTS = 'manage_events'
    MANAGE_USERS = 'manage_users'
