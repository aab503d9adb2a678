class FixTag:
    BEGIN_STRING       = "8"   # (e.g., FIX.4.4)
    MSG_TYPE           = "35"  # (e.g., A=Logon, D=New Order - Single)


class FixMsgType:
    HEARTBEAT              = "0"
    TEST_REQUEST           = "1"
    RESEND_REQUEST         = "2"
    REJECT                 = "3"
    SEQUENCE_RESET         = "4"
    LOGOUT                 = "5"
    INDICATION_OF_INTEREST = "6"
    ADVERTISEMENT          = "7"
    EXECUTION_REPORT       = "8"
    ORDER_CANCEL_REJECT    = "9"
    LOGON                  = "A"
    NEW_ORDER_SINGLE       = "D"
    ORDER_CANCEL_REQUEST   = "F"
    ORDER_CANCEL_REPLACE   = "G"
    ORDER_STATUS_REQUEST   = "H"


# Message types that get their name spelled out next to tag 35.
WELL_KNOWN_MSG_TYPES = {
    FixMsgType.LOGON: "Logon",
    FixMsgType.HEARTBEAT: "Heartbeat",
    FixMsgType.TEST_REQUEST: "Test Request",
    FixMsgType.RESEND_REQUEST: "Resend Request",
    FixMsgType.REJECT: "Reject",
    FixMsgType.SEQUENCE_RESET: "Sequence Reset",
    FixMsgType.LOGOUT: "Logout",
    FixMsgType.INDICATION_OF_INTEREST: "Indication of Interest",
    FixMsgType.ADVERTISEMENT: "Advertisement",
    FixMsgType.EXECUTION_REPORT: "Execution Report",
    FixMsgType.ORDER_CANCEL_REJECT: "Order Cancel Reject",
    FixMsgType.NEW_ORDER_SINGLE: "New Order - Single",
    FixMsgType.ORDER_CANCEL_REQUEST: "Order Cancel Request",
    FixMsgType.ORDER_CANCEL_REPLACE: "Order Cancel/Replace Request",
    FixMsgType.ORDER_STATUS_REQUEST: "Order Status Request",
}


class FixVersion:
    FIX40    = "FIX.4.0"
    FIX41    = "FIX.4.1"
    FIX42    = "FIX.4.2"
    FIX43    = "FIX.4.3"
    FIX44    = "FIX.4.4"
    FIX50    = "FIX.5.0"
    FIX50SP1 = "FIX.5.0SP1"
    FIX50SP2 = "FIX.5.0SP2"
    FIXT11   = "FIXT.1.1"

    DEFAULT  = FIX44


# BeginString -> packaged dictionary file, in protocol order
VERSION_FILES = {
    FixVersion.FIX40: "fix40.json",
    FixVersion.FIX41: "fix41.json",
    FixVersion.FIX42: "fix42.json",
    FixVersion.FIX43: "fix43.json",
    FixVersion.FIX44: "fix44.json",
    FixVersion.FIX50: "fix50.json",
    FixVersion.FIX50SP1: "fix50sp1.json",
    FixVersion.FIX50SP2: "fix50sp2.json",
    FixVersion.FIXT11: "fixt11.json",
}

VALUES_FILE = "fix_values.json"


class Delimiter:
    PIPE = "|"
    SOH  = "\x01"


DELIMITER_LABELS = {
    Delimiter.PIPE: "Pipe (|)",
    Delimiter.SOH: "SOH (ASCII 0x01)",
}
