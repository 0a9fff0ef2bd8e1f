"""SMPP command identifiers and command status codes."""

from __future__ import annotations

from enum import IntEnum

_RESPONSE_BIT = 0x80000000


def _from_signed(cls, value):
    """Accept a command id given as a signed 32-bit integer."""
    if isinstance(value, int) and -0x80000000 <= value < 0:
        return cls._value2member_map_.get(value & 0xFFFFFFFF)
    return None


class CommandId(IntEnum):
    """SMPP command identifier as carried in the PDU header."""

    GENERIC_NACK = 0x80000000
    BIND_RECEIVER = 0x00000001
    BIND_RECEIVER_RESP = 0x80000001
    BIND_TRANSMITTER = 0x00000002
    BIND_TRANSMITTER_RESP = 0x80000002
    QUERY_SM = 0x00000003
    QUERY_SM_RESP = 0x80000003
    SUBMIT_SM = 0x00000004
    SUBMIT_SM_RESP = 0x80000004
    DELIVER_SM = 0x00000005
    DELIVER_SM_RESP = 0x80000005
    UNBIND = 0x00000006
    UNBIND_RESP = 0x80000006
    REPLACE_SM = 0x00000007
    REPLACE_SM_RESP = 0x80000007
    CANCEL_SM = 0x00000008
    CANCEL_SM_RESP = 0x80000008
    BIND_TRANSCEIVER = 0x00000009
    BIND_TRANSCEIVER_RESP = 0x80000009
    OUTBIND = 0x0000000B
    ENQUIRE_LINK = 0x00000015
    ENQUIRE_LINK_RESP = 0x80000015
    SUBMIT_MULTI = 0x00000021
    SUBMIT_MULTI_RESP = 0x80000021
    ALERT_NOTIFICATION = 0x00000102
    DATA_SM = 0x00000103
    DATA_SM_RESP = 0x80000103

    @classmethod
    def _missing_(cls, value):
        return _from_signed(cls, value)

    def is_response(self) -> bool:
        """Tell whether this command id denotes a response PDU."""
        return bool(self.value & _RESPONSE_BIT)

    def __str__(self) -> str:
        return self.name


class CommandStatus(IntEnum):
    """SMPP command status (error) code."""

    ESME_ROK = 0x00000000
    ESME_RINVMSGLEN = 0x00000001
    ESME_RINVCMDLEN = 0x00000002
    ESME_RINVCMDID = 0x00000003
    ESME_RINVBNDSTS = 0x00000004
    ESME_RALYBND = 0x00000005
    ESME_RINVPRTFLG = 0x00000006
    ESME_RINVREGDLVFLG = 0x00000007
    ESME_RSYSERR = 0x00000008
    ESME_RINVSRCADR = 0x0000000A
    ESME_RINVDSTADR = 0x0000000B
    ESME_RINVMSGID = 0x0000000C
    ESME_RBINDFAIL = 0x0000000D
    ESME_RINVPASWD = 0x0000000E
    ESME_RINVSYSID = 0x0000000F
    ESME_RCANCELFAIL = 0x00000011
    ESME_RREPLACEFAIL = 0x00000013
    ESME_RMSGQFUL = 0x00000014
    ESME_RINVSERTYP = 0x00000015
    ESME_RADDCUSTFAIL = 0x00000019
    ESME_RDELCUSTFAIL = 0x0000001A
    ESME_RMODCUSTFAIL = 0x0000001B
    ESME_RENQCUSTFAIL = 0x0000001C
    ESME_RINVCUSTID = 0x0000001D
    ESME_RINVCUSTNAME = 0x0000001F
    ESME_RINVCUSTADR = 0x00000021
    ESME_RINVADR = 0x00000022
    ESME_RCUSTEXIST = 0x00000023
    ESME_RCUSTNOTEXIST = 0x00000024
    ESME_RADDDLFAIL = 0x00000026
    ESME_RMODDLFAIL = 0x00000027
    ESME_RDELDLFAIL = 0x00000028
    ESME_RVIEWDLFAIL = 0x00000029
    ESME_RLISTDLSFAIL = 0x00000030
    ESME_RPARAMRETFAIL = 0x00000031
    ESME_RINVPARAM = 0x00000032
    ESME_RINVNUMDESTS = 0x00000033
    ESME_RINVDLNAME = 0x00000034
    ESME_RINVDLMEMBDESC = 0x00000035
    ESME_RINVDLMEMBTYP = 0x00000038
    ESME_RINVDLMODOPT = 0x00000039
    ESME_RINVDESTFLAG = 0x00000040
    ESME_RINVSUBREP = 0x00000042
    ESME_RINVESMCLASS = 0x00000043
    ESME_RCNTSUBDL = 0x00000044
    ESME_RSUBMITFAIL = 0x00000045
    ESME_RINVSRCTON = 0x00000048
    ESME_RINVSRCNPI = 0x00000049
    ESME_RINVDSTTON = 0x00000050
    ESME_RINVDSTNPI = 0x00000051
    ESME_RINVSYSTYP = 0x00000053
    ESME_RINVREPFLAG = 0x00000054
    ESME_RINVNUMMSGS = 0x00000055
    ESME_RTHROTTLED = 0x00000058
    ESME_RPROVNOTALLWD = 0x00000059
    ESME_RINVSCHED = 0x00000061
    ESME_RINVEXPIRY = 0x00000062
    ESME_RINVDFTMSGID = 0x00000063
    ESME_RX_T_APPN = 0x00000064
    ESME_RX_P_APPN = 0x00000065
    ESME_RX_R_APPN = 0x00000066
    ESME_RQUERYFAIL = 0x00000067
    ESME_RINVPGCUSTID = 0x00000080
    ESME_RINVPGCUSTIDLEN = 0x00000081
    ESME_RINVCITYLEN = 0x00000082
    ESME_RINVSTATELEN = 0x00000083
    ESME_RINVZIPPREFIXLEN = 0x00000084
    ESME_RINVZIPPOSTFIXLEN = 0x00000085
    ESME_RINVMINLEN = 0x00000086
    ESME_RINVMIN = 0x00000087
    ESME_RINVPINLEN = 0x00000088
    ESME_RINVTERMCODELEN = 0x00000089
    ESME_RINVCHANNELLEN = 0x0000008A
    ESME_RINVCOVREGIONLEN = 0x0000008B
    ESME_RINVCAPCODELEN = 0x0000008C
    ESME_RINVMDTLEN = 0x0000008D
    ESME_RINVPRIORMSGLEN = 0x0000008E
    ESME_RINVPERMSGLEN = 0x0000008F
    ESME_RINVPGALERTLEN = 0x00000090
    ESME_RINVSMUSERLEN = 0x00000091
    ESME_RINVRTDBLEN = 0x00000092
    ESME_RINVREGDELLEN = 0x00000093
    ESME_RINVMSGDISTLEN = 0x00000094
    ESME_RINVPRIORMSG = 0x00000095
    ESME_RINVMDT = 0x00000096
    ESME_RINVPERMSG = 0x00000097
    ESME_RINVMSGDIST = 0x00000098
    ESME_RINVPGALERT = 0x00000099
    ESME_RINVSMUSER = 0x0000009A
    ESME_RINVRTDB = 0x0000009B
    ESME_RINVREGDEL = 0x0000009C
    ESME_RINVOPTPARLEN = 0x0000009F
    ESME_RINVOPTPARSTREAM = 0x000000C0
    ESME_ROPTPARNOTALLWD = 0x000000C1
    ESME_RINVPARLEN = 0x000000C2
    ESME_RMISSINGOPTPARAM = 0x000000C3
    ESME_RINVOPTPARAMVAL = 0x000000C4
    ESME_RDELIVERYFAILURE = 0x000000FE
    ESME_RUNKNOWNERR = 0x000000FF
    ESME_LAST_ERROR = 0x0000012C

    @property
    def description(self) -> str:
        """Human-readable meaning of the status code."""
        return _STATUS_DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.name


_STATUS_DESCRIPTIONS: dict[CommandStatus, str] = {
    CommandStatus.ESME_ROK: "No Error",
    CommandStatus.ESME_RINVMSGLEN: "Message Length is invalid",
    CommandStatus.ESME_RINVCMDLEN: "Command Length is invalid",
    CommandStatus.ESME_RINVCMDID: "Invalid Command ID",
    CommandStatus.ESME_RINVBNDSTS: "Incorrect BIND Status for given command",
    CommandStatus.ESME_RALYBND: "ESME Already in Bound State",
    CommandStatus.ESME_RINVPRTFLG: "Invalid Priority Flag",
    CommandStatus.ESME_RINVREGDLVFLG: "Invalid Registered Delivery Flag",
    CommandStatus.ESME_RSYSERR: "System Error",
    CommandStatus.ESME_RINVSRCADR: "Invalid Source Address",
    CommandStatus.ESME_RINVDSTADR: "Invalid Dest Addr",
    CommandStatus.ESME_RINVMSGID: "Message ID is invalid",
    CommandStatus.ESME_RBINDFAIL: "Bind Failed",
    CommandStatus.ESME_RINVPASWD: "Invalid Password",
    CommandStatus.ESME_RINVSYSID: "Invalid System ID",
    CommandStatus.ESME_RCANCELFAIL: "Cancel SM Failed",
    CommandStatus.ESME_RREPLACEFAIL: "Replace SM Failed",
    CommandStatus.ESME_RMSGQFUL: "Message Queue Full",
    CommandStatus.ESME_RINVSERTYP: "Invalid Service Type",
    CommandStatus.ESME_RADDCUSTFAIL: "Failed to Add Customer",
    CommandStatus.ESME_RDELCUSTFAIL: "Failed to delete Customer",
    CommandStatus.ESME_RMODCUSTFAIL: "Failed to modify customer",
    CommandStatus.ESME_RENQCUSTFAIL: "Failed to Enquire Customer",
    CommandStatus.ESME_RINVCUSTID: "Invalid Customer ID",
    CommandStatus.ESME_RINVCUSTNAME: "Invalid Customer Name",
    CommandStatus.ESME_RINVCUSTADR: "Invalid Customer Address",
    CommandStatus.ESME_RINVADR: "Invalid Address",
    CommandStatus.ESME_RCUSTEXIST: "Customer Exists",
    CommandStatus.ESME_RCUSTNOTEXIST: "Customer does not exist",
    CommandStatus.ESME_RADDDLFAIL: "Failed to Add DL",
    CommandStatus.ESME_RMODDLFAIL: "Failed to modify DL",
    CommandStatus.ESME_RDELDLFAIL: "Failed to Delete DL",
    CommandStatus.ESME_RVIEWDLFAIL: "Failed to View DL",
    CommandStatus.ESME_RLISTDLSFAIL: "Failed to list DLs",
    CommandStatus.ESME_RPARAMRETFAIL: "Param Retrieve Failed",
    CommandStatus.ESME_RINVPARAM: "Invalid Param",
    CommandStatus.ESME_RINVNUMDESTS: "Invalid number of destinations",
    CommandStatus.ESME_RINVDLNAME: "Invalid Distribution List name",
    CommandStatus.ESME_RINVDLMEMBDESC: "Invalid DL Member Description",
    CommandStatus.ESME_RINVDLMEMBTYP: "Invalid DL Member Type",
    CommandStatus.ESME_RINVDLMODOPT: "Invalid DL Modify Option",
    CommandStatus.ESME_RINVDESTFLAG: "Destination flag is invalid (submit_multi)",
    CommandStatus.ESME_RINVSUBREP: (
        "Invalid ‘submit with replace’ request "
        "(i.e. submit_sm with replace_if_present_flag set)"
    ),
    CommandStatus.ESME_RINVESMCLASS: "Invalid esm_class field data",
    CommandStatus.ESME_RCNTSUBDL: "Cannot Submit to Distribution List",
    CommandStatus.ESME_RSUBMITFAIL: "submit_sm or submit_multi failed",
    CommandStatus.ESME_RINVSRCTON: "Invalid Source address TON",
    CommandStatus.ESME_RINVSRCNPI: "Invalid Source address NPI",
    CommandStatus.ESME_RINVDSTTON: "Invalid Destination address TON",
    CommandStatus.ESME_RINVDSTNPI: "Invalid Destination address NPI",
    CommandStatus.ESME_RINVSYSTYP: "Invalid system_type field",
    CommandStatus.ESME_RINVREPFLAG: "Invalid replace_if_present flag",
    CommandStatus.ESME_RINVNUMMSGS: "Invalid number of messages",
    CommandStatus.ESME_RTHROTTLED: (
        "Throttling error (ESME has exceeded allowed message limits)"
    ),
    CommandStatus.ESME_RPROVNOTALLWD: "Provisioning Not Allowed",
    CommandStatus.ESME_RINVSCHED: "Invalid Scheduled Delivery Time",
    CommandStatus.ESME_RINVEXPIRY: "Invalid message validity period (Expiry time)",
    CommandStatus.ESME_RINVDFTMSGID: "Predefined Message Invalid or Not Found",
    CommandStatus.ESME_RX_T_APPN: "ESME Receiver Temporary App Error Code",
    CommandStatus.ESME_RX_P_APPN: "ESME Receiver Permanent App Error Code",
    CommandStatus.ESME_RX_R_APPN: "ESME Receiver Reject Message Error Code",
    CommandStatus.ESME_RQUERYFAIL: "query_sm request failed",
    CommandStatus.ESME_RINVPGCUSTID: "Paging Customer ID Invalid No such subscriber",
    CommandStatus.ESME_RINVPGCUSTIDLEN: "Paging Customer ID length Invalid",
    CommandStatus.ESME_RINVCITYLEN: "City Length Invalid",
    CommandStatus.ESME_RINVSTATELEN: "State Length Invalid",
    CommandStatus.ESME_RINVZIPPREFIXLEN: "Zip Prefix Length Invalid",
    CommandStatus.ESME_RINVZIPPOSTFIXLEN: "Zip Postfix Length Invalid",
    CommandStatus.ESME_RINVMINLEN: "MIN Length Invalid",
    CommandStatus.ESME_RINVMIN: "MIN Invalid (i.e. No such MIN)",
    CommandStatus.ESME_RINVPINLEN: "PIN Length Invalid",
    CommandStatus.ESME_RINVTERMCODELEN: "Terminal Code Length Invalid",
    CommandStatus.ESME_RINVCHANNELLEN: "Channel Length Invalid",
    CommandStatus.ESME_RINVCOVREGIONLEN: "Coverage Region Length Invalid",
    CommandStatus.ESME_RINVCAPCODELEN: "Cap Code Length Invalid",
    CommandStatus.ESME_RINVMDTLEN: "Message delivery time Length Invalid",
    CommandStatus.ESME_RINVPRIORMSGLEN: "Priority Message Length Invalid",
    CommandStatus.ESME_RINVPERMSGLEN: "Periodic Messages Length Invalid",
    CommandStatus.ESME_RINVPGALERTLEN: "Paging Alerts Length Invalid",
    CommandStatus.ESME_RINVSMUSERLEN: "int16 Message User Group Length Invalid",
    CommandStatus.ESME_RINVRTDBLEN: "Real Time Data broadcasts Length Invalid",
    CommandStatus.ESME_RINVREGDELLEN: "Registered Delivery Length Invalid",
    CommandStatus.ESME_RINVMSGDISTLEN: "Message Distribution Length Invalid",
    CommandStatus.ESME_RINVPRIORMSG: "Priority Message Length Invalid",
    CommandStatus.ESME_RINVMDT: "Message delivery time Invalid",
    CommandStatus.ESME_RINVPERMSG: "Periodic Messages Invalid",
    CommandStatus.ESME_RINVMSGDIST: "Message Distribution Invalid",
    CommandStatus.ESME_RINVPGALERT: "Paging Alerts Invalid",
    CommandStatus.ESME_RINVSMUSER: "int16 Message User Group Invalid",
    CommandStatus.ESME_RINVRTDB: "Real Time Data broadcasts Invalid",
    CommandStatus.ESME_RINVREGDEL: "Registered Delivery Invalid",
    CommandStatus.ESME_RINVOPTPARLEN: "Invalid Optional Parameter Length",
    CommandStatus.ESME_RINVOPTPARSTREAM: "KIF IW Field out of data",
    CommandStatus.ESME_ROPTPARNOTALLWD: "Optional Parameter not allowed",
    CommandStatus.ESME_RINVPARLEN: "Invalid Parameter Length.",
    CommandStatus.ESME_RMISSINGOPTPARAM: "Expected Optional Parameter missing",
    CommandStatus.ESME_RINVOPTPARAMVAL: "Invalid Optional Parameter Value",
    CommandStatus.ESME_RDELIVERYFAILURE: "Delivery Failure (used for data_sm_resp)",
    CommandStatus.ESME_RUNKNOWNERR: "Unknown Error",
    CommandStatus.ESME_LAST_ERROR: "THE VALUE OF THE LAST ERROR CODE",
}