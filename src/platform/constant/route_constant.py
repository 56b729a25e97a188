# API Route Constants

ROOT = '/'
HEALTH = '/health'
METRICS = '/metrics'

# Event routes
EVENT_BASE = '/events'
EVENT_CREATE = EVENT_BASE
EVENT_LIST = EVENT_BASE
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_UPDATE = f'{EVENT_BASE}/{{event_id}}'
EVENT_DELETE = f'{EVENT_BASE}/{{event_id}}'

# Booking routes
BOOKING_CREATE = '/booking'
BOOKING_TICKETS = '/booking_tickets/{email}'
PROCESS_PAYMENT = '/process_payment'

# User routes
USER_LOGIN = '/user'
USER_LIST = '/all_user'
USER_IS_ADMIN = '/users/admin/{email}'
USER_UPDATE = '/user/{user_id}'
USER_DELETE = '/user/{user_id}'
