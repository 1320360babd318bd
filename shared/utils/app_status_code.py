class AppStatusCode:
    # success
    DATA_RETRIEVED_SUCCESSFULLY = "200"
    CREATED_SUCCESSFULLY = "201"
    DELETED_SUCCESSFULLY = "204"

    # generic failures
    OPERATION_FAILED = "1000"
    INVALID_INPUT = "1001"
    REQUIRED_VALIDATION_ERROR = "1002"
    INVALID_SORT_FIELD = "1003"

    # authentication
    AUTHENTICATION_TOKEN_INVALID = "2001"
    AUTHENTICATION_TOKEN_EXPIRED = "2002"
    AUTHENTICATION_USER_INVALID = "2003"
    AUTHENTICATION_USER_INACTIVE = "2004"
    AUTHENTICATION_CREDENTIALS_INVALID = "2005"
    AUTHORIZATION_FORBIDDEN = "2006"
    USER_EMAIL_IS_UNIQUE = "2007"

    # pantry
    ITEM_NOT_FOUND = "3001"
    ITEM_ACCESS_FORBIDDEN = "3002"
    ITEM_NAME_IS_UNIQUE = "3003"
    STOCK_UPDATE_NOT_FOUND = "3101"
    STOCK_UPDATE_ACCESS_FORBIDDEN = "3102"
    STOCK_QUANTITY_MISMATCH = "3103"
    STOCK_QUANTITY_NEGATIVE = "3104"

    # tools
    TOOL_NOT_FOUND = "4001"
