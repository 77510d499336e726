"""User-facing strings. The UI is German, backend error texts stay untranslated."""

# Validation
NAME_TOO_SHORT = "Listenname muss mindestens 3 Zeichen lang sein."
NEWSPAPERS_EMPTY = "Die Liste muss mindestens eine Zeitung enthalten."
FIELD_REQUIRED = "Dieses Feld ist erforderlich."

# Errors
GENERIC_ERROR = "Ein unerwarteter Fehler ist aufgetreten."
LIST_NOT_FOUND = "Liste nicht gefunden"
LIST_ID_MISSING = "Listen-ID fehlt"
NOT_AUTHENTICATED = "Nicht angemeldet"

# Toasts
TOAST_ERROR_TITLE = "Fehler"
TOAST_LIST_CREATED = "Liste erstellt!"
TOAST_LIST_SAVED = "Gespeichert!"
TOAST_AUTHOR_FILTER_SAVED = "Autorenfilter gespeichert!"
TOAST_CATEGORY_FILTER_SAVED = "Kategorienfilter gespeichert!"
AUTHOR_FILTER_FAILED = "Autorenfilter konnte nicht gespeichert werden: {error}"
CATEGORY_FILTER_FAILED = "Kategorienfilter konnte nicht gespeichert werden: {error}"

# Icons and colors understood by the UI toast component
ICON_SUCCESS = "i-heroicons-check-circle"
ICON_FAILURE = "i-heroicons-x-circle"
COLOR_SUCCESS = "success"
COLOR_ERROR = "error"
