"""SMPP protocol constants and process-wide default address TON/NPI."""

from __future__ import annotations

import threading

SM_CONNID_LEN = 16
SM_MSG_LEN = 254
SM_SYSID_LEN = 16
SM_MSGID_LEN = 64
SM_PASS_LEN = 9
SM_DATE_LEN = 17
SM_SRVTYPE_LEN = 6
SM_SYSTYPE_LEN = 13
SM_ADDR_LEN = 21
SM_DATA_ADDR_LEN = 65
SM_ADDR_RANGE_LEN = 41
SM_TYPE_LEN = 13
SM_DL_NAME_LEN = 21
SM_PARAM_NAME_LEN = 10
SM_PARAM_VALUE_LEN = 10
SM_MAX_CNT_DEST_ADDR = 254

# GSM specific: a short message must be no larger than 140 octets.
SM_GSM_MSG_LEN = 140

CONNECTION_CLOSED = 0
CONNECTION_OPENED = 1

SM_ACK = 1
SM_NO_ACK = 0
SM_RESPONSE_ACK = 0
SM_RESPONSE_TNACK = 1
SM_RESPONSE_PNACK = 2

# Interface version
SMPP_V33 = -0x33
SMPP_V34 = 0x34

# Address TON
GSM_TON_UNKNOWN = 0x00
GSM_TON_INTERNATIONAL = 0x01
GSM_TON_NATIONAL = 0x02
GSM_TON_NETWORK = 0x03
GSM_TON_SUBSCRIBER = 0x04
GSM_TON_ALPHANUMERIC = 0x05
GSM_TON_ABBREVIATED = 0x06
GSM_TON_RESERVED_EXTN = 0x07

# Address NPI
GSM_NPI_UNKNOWN = 0x00
GSM_NPI_E164 = 0x01
GSM_NPI_ISDN = GSM_NPI_E164
GSM_NPI_X121 = 0x03
GSM_NPI_TELEX = 0x04
GSM_NPI_LAND_MOBILE = 0x06
GSM_NPI_NATIONAL = 0x08
GSM_NPI_PRIVATE = 0x09
GSM_NPI_ERMES = 0x0A
GSM_NPI_INTERNET = 0x0E
GSM_NPI_WAP_CLIENT_ID = 0x12
GSM_NPI_RESERVED_EXTN = 0x0F

# Service type
SERVICE_NULL = ""
SERVICE_CMT = "CMT"
SERVICE_CPT = "CPT"
SERVICE_VMN = "VMN"
SERVICE_VMA = "VMA"
SERVICE_WAP = "WAP"
SERVICE_USSD = "USSD"

SMPP_PROTOCOL = 1
SMPPP_PROTOCOL = 2
SM_SERVICE_MOBILE_TERMINATED = 0
SM_SERVICE_MOBILE_ORIGINATED = 1
SM_SERVICE_MOBILE_TRANSCEIVER = 2

# State of a message at the SMSC
SM_STATE_EN_ROUTE = 1
SM_STATE_DELIVERED = 2
SM_STATE_EXPIRED = 3
SM_STATE_DELETED = 4
SM_STATE_UNDELIVERABLE = 5
SM_STATE_ACCEPTED = 6
SM_STATE_INVALID = 7
SM_STATE_REJECTED = 8

# ESM class: messaging mode
SM_ESM_DEFAULT = 0x00
SM_DATAGRAM_MODE = 0x01
SM_FORWARD_MODE = 0x02
SM_STORE_FORWARD_MODE = 0x03

# ESM class: message type
SM_SMSC_DLV_RCPT_TYPE = 0x04
SM_ESME_DLV_ACK_TYPE = 0x08
SM_ESME_MAN_USER_ACK_TYPE = 0x10
SM_CONV_ABORT_TYPE = 0x18
SM_INTMD_DLV_NOTIFY_TYPE = 0x20

# ESM class: GSM network features
SM_NONE_GSM = 0x00
SM_UDH_GSM = 0x40
SM_REPLY_PATH_GSM = 0x80
SM_UDH_REPLY_PATH_GSM = 0xC0

# Optional parameter tags and length bounds
OPT_PAR_MSG_WAIT = 2
OPT_PAR_PRIV_IND = 0x0201
OPT_PAR_SRC_SUBADDR = 0x0202
OPT_PAR_SRC_SUBADDR_MIN = 2
OPT_PAR_SRC_SUBADDR_MAX = 23
OPT_PAR_DEST_SUBADDR = 0x0203
OPT_PAR_DEST_SUBADDR_MIN = 2
OPT_PAR_DEST_SUBADDR_MAX = 23
OPT_PAR_USER_MSG_REF = 0x0204
OPT_PAR_USER_RESP_CODE = 0x0205
OPT_PAR_LANG_IND = 0x020D
OPT_PAR_SRC_PORT = 0x020A
OPT_PAR_DST_PORT = 0x020B
OPT_PAR_SAR_MSG_REF_NUM = 0x020C
OPT_PAR_SAR_TOT_SEG = 0x020E
OPT_PAR_SAR_SEG_SNUM = 0x020F
OPT_PAR_SC_IF_VER = 0x0210
OPT_PAR_DISPLAY_TIME = 0x1201
OPT_PAR_MS_VALIDITY = 0x1204
OPT_PAR_DPF_RES = 0x0420
OPT_PAR_SET_DPF = 0x0421
OPT_PAR_MS_AVAIL_STAT = 0x0422
OPT_PAR_NW_ERR_CODE = 0x0423
OPT_PAR_NW_ERR_CODE_MIN = 3
OPT_PAR_NW_ERR_CODE_MAX = 3
OPT_PAR_DEL_FAIL_RSN = 0x0425
OPT_PAR_MORE_MSGS = 0x0426
OPT_PAR_MSG_STATE = 0x0427
OPT_PAR_CALLBACK_NUM = 0x0381
OPT_PAR_CALLBACK_NUM_MIN = 4
OPT_PAR_CALLBACK_NUM_MAX = 19
OPT_PAR_CALLBACK_NUM_PRES_IND = 0x0302
OPT_PAR_CALLBACK_NUM_ATAG = 0x0303
OPT_PAR_CALLBACK_NUM_ATAG_MIN = 1
OPT_PAR_CALLBACK_NUM_ATAG_MAX = 65
OPT_PAR_NUM_MSGS = 0x0304
OPT_PAR_SMS_SIGNAL = 0x1203
OPT_PAR_ALERT_ON_MSG_DELIVERY = 0x130C
OPT_PAR_ITS_REPLY_TYPE = 0x1380
OPT_PAR_ITS_SESSION_INFO = 0x1383
OPT_PAR_USSD_SER_OP = 0x0501

# Priority
SM_NOPRIORITY = 0
SM_PRIORITY = 1

# Registered delivery: SMSC delivery receipt (bits 1 and 0)
SM_SMSC_RECEIPT_MASK = 0x03
SM_SMSC_RECEIPT_NOT_REQUESTED = 0x00
SM_SMSC_RECEIPT_REQUESTED = 0x01
SM_SMSC_RECEIPT_ON_FAILURE = 0x02
# Registered delivery: SME originated acknowledgement (bits 3 and 2)
SM_SME_ACK_MASK = 0x0C
SM_SME_ACK_NOT_REQUESTED = 0x00
SM_SME_ACK_DELIVERY_REQUESTED = 0x04
SM_SME_ACK_MANUAL_REQUESTED = 0x08
SM_SME_ACK_BOTH_REQUESTED = 0x0C
# Registered delivery: intermediate notification (bit 4)
SM_NOTIF_MASK = 0x10
SM_NOTIF_NOT_REQUESTED = 0x00
SM_NOTIF_REQUESTED = 0x10

# Replace-if-present flag
SM_NOREPLACE = 0
SM_REPLACE = 1

# Destination flag
SM_DEST_SME_ADDRESS = 1
SM_DEST_DL_NAME = 2

# Higher layer message type
SM_LAYER_WDP = 0
SM_LAYER_WCMP = 1

# Operation class
SM_OPCLASS_DATAGRAM = 0
SM_OPCLASS_TRANSACTION = 3

# MSC addresses (tags are signed 16-bit values 0x8081 and 0x8082)
OPT_PAR_ORIG_MSC_ADDR = -32639
OPT_PAR_ORIG_MSC_ADDR_MIN = 1
OPT_PAR_ORIG_MSC_ADDR_MAX = 24
OPT_PAR_DEST_MSC_ADDR = -32638
OPT_PAR_DEST_MSC_ADDR_MIN = 1
OPT_PAR_DEST_MSC_ADDR_MAX = 24

OPT_PAR_UNUSED = 0xFFFF

OPT_PAR_DST_ADDR_SUBUNIT = 0x0005
OPT_PAR_DST_NW_TYPE = 0x0006
OPT_PAR_DST_BEAR_TYPE = 0x0007
OPT_PAR_DST_TELE_ID = 0x0008
OPT_PAR_SRC_ADDR_SUBUNIT = 0x000D
OPT_PAR_SRC_NW_TYPE = 0x000E
OPT_PAR_SRC_BEAR_TYPE = 0x000F
OPT_PAR_SRC_TELE_ID = 0x0010
OPT_PAR_QOS_TIME_TO_LIVE = 0x0017
OPT_PAR_QOS_TIME_TO_LIVE_MIN = 1
OPT_PAR_QOS_TIME_TO_LIVE_MAX = 4
OPT_PAR_PAYLOAD_TYPE = 0x0019
OPT_PAR_ADD_STAT_INFO = 0x001D
OPT_PAR_ADD_STAT_INFO_MIN = 1
OPT_PAR_ADD_STAT_INFO_MAX = 256
OPT_PAR_RECP_MSG_ID = 0x001E
OPT_PAR_RECP_MSG_ID_MIN = 1
OPT_PAR_RECP_MSG_ID_MAX = 65
OPT_PAR_MSG_PAYLOAD = 0x0424
OPT_PAR_MSG_PAYLOAD_MIN = 1
OPT_PAR_MSG_PAYLOAD_MAX = 1500

# User data header
UDH_CONCAT_MSG_8_BIT_REF = 0x00
UDH_CONCAT_MSG_16_BIT_REF = 0x08

# Defaults
DFLT_MSGID = ""
DFLT_MSG = ""
DFLT_SRVTYPE = ""
DFLT_SYSID = ""
DFLT_PASS = ""
DFLT_SYSTYPE = ""
DFLT_ADDR_RANGE = ""
DFLT_DATE = ""
DFLT_ADDR = ""
DFLT_MSG_STATE = 0
DFLT_ERR = 0
DFLT_SCHEDULE = ""
DFLT_VALIDITY = ""
DFLT_REG_DELIVERY = SM_SMSC_RECEIPT_NOT_REQUESTED | SM_SME_ACK_NOT_REQUESTED | SM_NOTIF_NOT_REQUESTED
DFLT_DFLTMSGID = 0
DFLT_MSG_LEN = 0
DFLT_ESM_CLASS = 0
DFLT_DATA_CODING = 0
DFLT_PROTOCOLID = 0
DFLT_PRIORITY_FLAG = 0
DFTL_REPLACE_IFP = 0
DFLT_DL_NAME = ""
DFLT_GSM_TON = GSM_TON_UNKNOWN
DFLT_GSM_NPI = GSM_NPI_UNKNOWN
DFLT_DEST_FLAG = 0
MAX_PDU_LEN = 64 << 10

PDU_HEADER_SIZE = 16
TLV_HEADER_SIZE = 4

# Timeouts, in milliseconds
RECEIVER_TIMEOUT = 60000
CONNECTION_RECEIVE_TIMEOUT = 10000
UNBIND_RECEIVE_TIMEOUT = 5000
CONNECTION_SEND_TIMEOUT = 20000
COMMS_TIMEOUT = 60000
QUEUE_TIMEOUT = 10000
ACCEPT_TIMEOUT = 60000

RECEIVE_BLOCKING = -1

MAX_VALUE_PORT = 65535
MIN_VALUE_PORT = 100
MIN_LENGTH_ADDRESS = 7


class _AddressDefaults:
    """Thread-safe holder of the default TON and NPI."""

    def __init__(self, ton: int, npi: int) -> None:
        self._lock = threading.Lock()
        self.ton = ton
        self.npi = npi

    def set(self, name: str, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{name} must fit in one octet, got {value}")
        with self._lock:
            setattr(self, name, value)

    def get(self, name: str) -> int:
        with self._lock:
            return getattr(self, name)


_defaults = _AddressDefaults(DFLT_GSM_TON, DFLT_GSM_NPI)


def set_default_ton(ton: int) -> None:
    """Set the default type of number used for new addresses."""
    _defaults.set("ton", ton)


def get_default_ton() -> int:
    """Return the default type of number."""
    return _defaults.get("ton")


def set_default_npi(npi: int) -> None:
    """Set the default numbering plan indicator used for new addresses."""
    _defaults.set("npi", npi)


def get_default_npi() -> int:
    """Return the default numbering plan indicator."""
    return _defaults.get("npi")