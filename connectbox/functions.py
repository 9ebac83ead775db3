#!/usr/bin/env python3
"""
Function codes for the ConnectBox getter.xml / setter.xml endpoints

Every read and write is multiplexed through two URLs; the ``fun`` form
field selects the operation. Each getter code has exactly one response
record, see router_types.RESPONSE_TYPES.
"""

# Setter codes
FN_LOGIN = "15"
FN_LOGOUT = "16"

# Getter codes
FN_GLOBAL_SETTINGS = "1"
FN_CM_SYSTEM_INFO = "2"
FN_MULTILANG = "3"
FN_STATUS = "5"
FN_CONFIGURATION = "6"
FN_DOWNSTREAM_TABLE = "10"
FN_UPSTREAM_TABLE = "11"
FN_SIGNAL_TABLE = "12"
FN_EVENT_LOG_TABLE = "13"
FN_FIREWALL_LOG_TABLE = "19"
FN_LANGSETLIST = "21"
FN_FAIL = "22"
FN_LOGIN_TIMER = "24"
FN_LAN_SETTING = "100"
FN_DHCPV6_INFO = "103"
FN_BASIC_DHCP = "105"
FN_WAN_SETTING = "107"
FN_IP_FILTERING = "109"
FN_IPV6_FILTERING = "111"
FN_PORT_TRIGGER = "113"
FN_WEB_FILTER = "115"
FN_IPV6_WEB_FILTER = "117"
FN_MAC_FILTERING = "119"
FN_FORWARDING = "121"
FN_LAN_USER_TABLE = "123"
FN_DDNS = "124"
FN_REMOTE_ACCESS = "131"
FN_MTU_SIZE = "134"
FN_CM_STATE = "136"
FN_WIRED_STATE_1 = "137"
FN_WIRED_STATE_2 = "143"
FN_CM_STATUS = "144"
FN_ETH_FLAPLIST = "147"
FN_WIRELESS_BASIC_1 = "300"
FN_WIRELESS_WMM = "302"
FN_WIRELESS_SITE_SURVEY = "305"
FN_WIRELESS_GUEST_NETWORK_1 = "307"
FN_CM_WIRELESS_WPS_1 = "309"
FN_CM_WIRELESS_ACCESS_CONTROL = "311"
FN_CHANNEL_MAP = "313"
FN_WIRELESS_BASIC_2 = "315"
FN_WIRELESS_GUEST_NETWORK_2 = "317"
FN_WIRELESS_CLIENT = "322"
FN_CM_WIRELESS_WPS_2 = "323"
FN_DEFAULT_VALUE = "324"
FN_GST_RANDOM_PASSWORD = "325"
FN_WIFI_STATE = "326"
FN_WIRELESS_RESETTING = "328"
