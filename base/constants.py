class Constants:
    DEFAULT_PAGINATOR_PAGE_SIZE = 20
    # Status ids at or above this value are not valid targets for a status change.
    # Overridable through settings.ORDER_STATUS_SELECTABLE_BELOW
    ORDER_STATUS_SELECTABLE_BELOW = 4
    UNKNOWN_COUNTRY = "Unknown"

    class Messages:
        COUNTRY_REQUIRED = "Please select a country."
        STATUS_SAVE_FAILED = "An error occurred while saving the changes. Please try again."
        DELETE_FAILED = "Unable to delete customer due to related records."
