"""Gateway constants for the Mollie XML SMS API."""

GATEWAY_URL = "https://secure.mollie.nl/xml/sms"

# Gateway names mapped to the codes the API expects
GATEWAYS = {
    "basic": "2",
    "business": "4",
    "business+": "1",
    "landline": "8",
}

DEFAULT_GATEWAY = GATEWAYS["basic"]
DEFAULT_CHARSET = "UTF-8"
DEFAULT_MESSAGE_TYPE = "normal"

REQUIRED_PARAMS = (
    "username",
    "md5_password",
    "originator",
    "gateway",
    "charset",
    "type",
    "recipients",
    "message",
)

MAX_NUMERIC_ORIGINATOR = 14
MAX_ALPHANUMERIC_ORIGINATOR = 11

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

RESULT_SENT = 10

# Result codes returned by the gateway in <resultcode>
RESULT_CODES = {
    10: "message sent",
    20: "no 'username'",
    21: "no 'password'",
    22: "no, or incorrect, 'originator'",
    23: "no 'recipients'",
    24: "no 'message'",
    25: "incorrect 'recipients'",
    26: "incorrect 'originator'",
    27: "incorrect 'message'",
    28: "charset failure",
    29: "parameter failure",
    30: "incorrect 'username' or 'password'",
    31: "not enough credits to send message",
    38: "binary UDH parameter misformed",
    39: "'deliverydate' format is not correct",
    98: "gateway unreachable",
    99: "unknown error",
}
