# Log events (extra={'event': ...})
LINK_REDIRECT = 'LINK_REDIRECT'
LINK_NOT_FOUND = 'LINK_NOT_FOUND'
LINK_CREATED = 'LINK_CREATED'
INVALID_FORM = 'INVALID_FORM'
ROUTE_NOT_FOUND = 'ROUTE_NOT_FOUND'
KEY_ALLOCATION_FAILED = 'KEY_ALLOCATION_FAILED'
CONFIG_LOAD_FAILED = 'CONFIG_LOAD_FAILED'
