#!/usr/bin/env python3
"""
Response records for the ConnectBox getter.xml endpoint

Each getter function code answers with its own XML document. The records
below describe those documents as dataclasses; the XML tag of every field
is kept in the field metadata. Decoding runs in two phases:

1. A structural pass copies element text into the fields. Scalars take the
   text of their element (empty when absent), ``List[...]`` fields collect
   every matching element in document order, nested records recurse.
2. ``post_decode`` converts the few fields the router does not send in
   their natural form (uptime strings, Fahrenheit temperatures) and plain
   integer fields.

Example:
    >>> root = ET.fromstring(body)
    >>> info = CMSystemInfo.from_xml(root)
    >>> info.system_uptime
    405035
"""

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, List, Type, TypeVar, Union, get_args, get_origin

from .exceptions import DecodeError
from .functions import (
    FN_BASIC_DHCP,
    FN_CHANNEL_MAP,
    FN_CM_STATE,
    FN_CM_STATUS,
    FN_CM_SYSTEM_INFO,
    FN_CM_WIRELESS_ACCESS_CONTROL,
    FN_CM_WIRELESS_WPS_1,
    FN_CM_WIRELESS_WPS_2,
    FN_CONFIGURATION,
    FN_DDNS,
    FN_DEFAULT_VALUE,
    FN_DHCPV6_INFO,
    FN_DOWNSTREAM_TABLE,
    FN_ETH_FLAPLIST,
    FN_EVENT_LOG_TABLE,
    FN_FAIL,
    FN_FIREWALL_LOG_TABLE,
    FN_FORWARDING,
    FN_GLOBAL_SETTINGS,
    FN_GST_RANDOM_PASSWORD,
    FN_IP_FILTERING,
    FN_IPV6_FILTERING,
    FN_IPV6_WEB_FILTER,
    FN_LAN_SETTING,
    FN_LAN_USER_TABLE,
    FN_LANGSETLIST,
    FN_LOGIN_TIMER,
    FN_MAC_FILTERING,
    FN_MTU_SIZE,
    FN_MULTILANG,
    FN_PORT_TRIGGER,
    FN_REMOTE_ACCESS,
    FN_SIGNAL_TABLE,
    FN_STATUS,
    FN_UPSTREAM_TABLE,
    FN_WAN_SETTING,
    FN_WEB_FILTER,
    FN_WIFI_STATE,
    FN_WIRED_STATE_1,
    FN_WIRED_STATE_2,
    FN_WIRELESS_BASIC_1,
    FN_WIRELESS_BASIC_2,
    FN_WIRELESS_CLIENT,
    FN_WIRELESS_GUEST_NETWORK_1,
    FN_WIRELESS_GUEST_NETWORK_2,
    FN_WIRELESS_RESETTING,
    FN_WIRELESS_SITE_SURVEY,
    FN_WIRELESS_WMM,
)

T = TypeVar("T")

# Input format: "1day(s)2h:34m:56s", the day part is optional
DURATION_RE = re.compile(r"(?:(\d+)day\(s\))?(\d+)h:(\d+)m:(\d+)s")


# ============================================================================
# Field helpers and value transforms
# ============================================================================

def xml_field(tag: str, default: Any = "") -> Any:
    """Scalar field read from the child element ``tag``"""
    return field(default=default, metadata={"xml": tag})


def xml_list(tag: str) -> Any:
    """Repeated field; ``tag`` may be a path such as ``outer/entry``"""
    return field(default_factory=list, metadata={"xml": tag})


def xml_record(tag: str, record: type) -> Any:
    """Nested singleton record, empty when the element is absent"""
    return field(default_factory=record, metadata={"xml": tag})


def parse_duration(value: str) -> int:
    """
    Convert a router duration string to seconds

    Args:
        value: Duration such as "10day(s)20h:15m:30s" or "0h:0m:30s"

    Returns:
        Total number of seconds

    Raises:
        DecodeError: If the string does not look like a duration
    """
    match = DURATION_RE.search(value or "")
    if match is None:
        raise DecodeError("invalid duration string")

    days, hours, minutes, seconds = (int(g) if g else 0 for g in match.groups())
    return days * 86400 + hours * 3600 + minutes * 60 + seconds


def fahrenheit_to_celsius(fahrenheit: int) -> int:
    """
    Convert Fahrenheit to Celsius with integer arithmetic

    ``(f - 32) * 5 / 9`` evaluated left to right, the division truncating
    toward zero: 0F gives -17, not -18.
    """
    scaled = (fahrenheit - 32) * 5
    if scaled < 0:
        return -(-scaled // 9)
    return scaled // 9


def parse_int(value: Union[str, int]) -> int:
    """Decode integer element text; empty text is 0"""
    if isinstance(value, int):
        return value
    text = value.strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        raise DecodeError(f"invalid integer: {value!r}") from None


# ============================================================================
# Decoder
# ============================================================================

class Record:
    """Base class for records decoded from getter.xml responses"""

    @classmethod
    def from_xml(cls: Type[T], element: ET.Element) -> T:
        """Decode a record from a parsed XML element"""
        return decode_record(cls, element)

    @classmethod
    def post_decode(cls, values: Dict[str, Any]) -> None:
        """Transform decoded values in place before the record is built"""


def _element_text(element: ET.Element) -> str:
    return element.text or ""


def _decode_value(annotation: Any, element: ET.Element, path: str) -> Any:
    matches = element.findall(path)

    if get_origin(annotation) in (list, List):
        (item_type,) = get_args(annotation)
        if is_dataclass(item_type):
            return [decode_record(item_type, match) for match in matches]
        return [_element_text(match) for match in matches]

    if is_dataclass(annotation):
        if not matches:
            return annotation()
        return decode_record(annotation, matches[-1])

    # Later elements overwrite earlier ones
    if not matches:
        return ""
    return _element_text(matches[-1])


def decode_record(cls: Type[T], element: ET.Element) -> T:
    """
    Decode ``element`` into the dataclass ``cls``

    The element's own tag is not checked; only its children are matched
    against the field tags.
    """
    if not is_dataclass(cls):
        raise TypeError(f"{cls!r} is not a dataclass")

    values: Dict[str, Any] = {}
    for f in fields(cls):
        if not f.init:
            continue
        values[f.name] = _decode_value(f.type, element, f.metadata.get("xml", f.name))

    if isinstance(cls, type) and issubclass(cls, Record):
        cls.post_decode(values)

    for f in fields(cls):
        if f.type is int and f.name in values:
            values[f.name] = parse_int(values[f.name])

    return cls(**values)


def decode(body: Union[str, bytes], shape: Type[T]) -> T:
    """
    Parse an XML document and decode it into ``shape``

    Raises:
        DecodeError: If the body is not well-formed XML or a field cannot
            be converted
    """
    try:
        root = ET.fromstring(body)
    # Unknown or multi-byte encoding declarations fail outside ParseError
    except (ET.ParseError, LookupError, ValueError) as e:
        raise DecodeError(str(e)) from e
    return decode_record(shape, root)


# ============================================================================
# Records
# ============================================================================

@dataclass
class GlobalSettings(Record):
    """fn=1"""
    access_level: str = xml_field("AccessLevel")
    sw_version: str = xml_field("SwVersion")
    cm_provision_mode: str = xml_field("CmProvisionMode")
    ds_lite: str = xml_field("DsLite")
    gw_provision_mode: str = xml_field("GwProvisionMode")
    gw_oper_mode: str = xml_field("GWOperMode")
    config_vender_model: str = xml_field("ConfigVenderModel")
    hide_remote_access: str = xml_field("HideRemoteAccess")
    hide_modem_mode: str = xml_field("HideModemMode")
    hide_customer_dhcp_lan_change: str = xml_field("HideCustomerDhcpLanChange")
    show_ddns: str = xml_field("ShowDDNS")
    operator_id: str = xml_field("OperatorId")
    access_denied: str = xml_field("AccessDenied")
    locked_out: str = xml_field("LockedOut")
    country_id: str = xml_field("CountryID")
    title: str = xml_field("title")
    interface: str = xml_field("Interface")
    oper_status: str = xml_field("operStatus")


@dataclass
class CMSystemInfo(Record):
    """fn=2, uptime is converted to seconds"""
    docsis_mode: str = xml_field("cm_docsis_mode")
    hardware_version: str = xml_field("cm_hardware_version")
    mac_addr: str = xml_field("cm_mac_addr")
    serial_number: str = xml_field("cm_serial_number")
    system_uptime: int = xml_field("cm_system_uptime", 0)
    network_access: str = xml_field("cm_network_access")

    @classmethod
    def post_decode(cls, values: Dict[str, Any]) -> None:
        values["system_uptime"] = parse_duration(values["system_uptime"])


@dataclass
class Multilang(Record):
    """fn=3"""
    web_cap_por: str = xml_field("WebCapPor")
    lang: str = xml_field("Lang")


@dataclass
class Status(Record):
    """fn=5"""
    cm_status: str = xml_field("cm_status")
    bandmode: str = xml_field("Bandmode")
    bss_enable_2g: str = xml_field("BssEnable2g")
    ssid_2g: str = xml_field("SSID2G")
    pre_shared_key_2g_length: str = xml_field("PreSharedKey2gLength")
    bss_enable_5g: str = xml_field("BssEnable5g")
    ssid_5g: str = xml_field("SSID5G")
    pre_shared_key_5g_length: str = xml_field("PreSharedKey5gLength")
    lan_user_count: str = xml_field("LanUserCount")


@dataclass
class Configuration(Record):
    """fn=6"""
    frequency_plan: str = xml_field("FrequencyPlan")
    frequency: str = xml_field("Frequency")


@dataclass
class DownstreamTableDownstream:
    freq: str = xml_field("freq")
    pow: str = xml_field("pow")
    snr: str = xml_field("snr")
    mod: str = xml_field("mod")
    chid: str = xml_field("chid")
    rx_mer: str = xml_field("RxMER")
    pre_rs: str = xml_field("PreRs")
    post_rs: str = xml_field("PostRs")
    is_qam_locked: str = xml_field("IsQamLocked")
    is_fec_locked: str = xml_field("IsFECLocked")
    is_mpeg_locked: str = xml_field("IsMpegLocked")


@dataclass
class DownstreamTable(Record):
    """fn=10"""
    ds_num: str = xml_field("ds_num")
    downstreams: List[DownstreamTableDownstream] = xml_list("downstream")


@dataclass
class UpstreamTableUpstream:
    usid: str = xml_field("usid")
    freq: str = xml_field("freq")
    power: str = xml_field("power")
    srate: str = xml_field("srate")
    mod: str = xml_field("mod")
    ustype: str = xml_field("ustype")
    t1_timeouts: str = xml_field("t1Timeouts")
    t2_timeouts: str = xml_field("t2Timeouts")
    t3_timeouts: str = xml_field("t3Timeouts")
    t4_timeouts: str = xml_field("t4Timeouts")
    channeltype: str = xml_field("channeltype")
    message_type: str = xml_field("messageType")


@dataclass
class UpstreamTable(Record):
    """fn=11"""
    us_num: str = xml_field("us_num")
    upstreams: List[UpstreamTableUpstream] = xml_list("upstream")


@dataclass
class SignalTableSignal:
    dsid: str = xml_field("dsid")
    unerrored: str = xml_field("unerrored")
    correctable: str = xml_field("correctable")
    uncorrectable: str = xml_field("uncorrectable")


@dataclass
class SignalTable(Record):
    """fn=12"""
    sig_num: str = xml_field("sig_num")
    signals: List[SignalTableSignal] = xml_list("signal")


@dataclass
class EventLogTableEventLog:
    prior: str = xml_field("prior")
    text: str = xml_field("text")
    time: str = xml_field("time")
    t: str = xml_field("t")


@dataclass
class EventLogTable(Record):
    """fn=13"""
    event_logs: List[EventLogTableEventLog] = xml_list("eventlog")


@dataclass
class FirewallLogTableFirewallLog:
    prior: str = xml_field("prior")
    text: str = xml_field("text")
    time: str = xml_field("time")


@dataclass
class FirewallLogTable(Record):
    """fn=19"""
    firewall_logs: List[FirewallLogTableFirewallLog] = xml_list("firewalllog")


@dataclass
class Langsetlist(Record):
    """fn=21"""
    lang_set_support: List[str] = xml_list("langSet_support")


@dataclass
class Fail(Record):
    """fn=22"""
    fail_count: str = xml_field("FailCount")


@dataclass
class LoginTimer(Record):
    """fn=24"""
    flag: str = xml_field("Flag")
    access_level: str = xml_field("AccessLevel")


@dataclass
class LANSetting(Record):
    """fn=100"""
    upnp: str = xml_field("UPnP")
    lan_mac: str = xml_field("LanMAC")
    lan_ip: str = xml_field("LanIP")
    dmz_addr: str = xml_field("DMZaddr")
    dmz: str = xml_field("DMZ")
    lan_ipv6: str = xml_field("LanIPv6")
    lan_ipv6_prefix: str = xml_field("LanIPv6Prefix")
    subnet_mask: str = xml_field("subnetmask")
    dhcp_start_address: str = xml_field("DHCP_startaddress")
    dhcp_end_address: str = xml_field("DHCP_endaddress")


@dataclass
class DHCPv6Info(Record):
    """fn=103"""
    allow_dhcpv6_setting: str = xml_field("AllowDHCPv6Setting")
    ipv6_ra_managed_flag: str = xml_field("ipv6RAManagedflag")
    ipv6_saddr: str = xml_field("ipv6_saddr")
    ipv6_prefix: str = xml_field("ipv6_prefix")
    number_of_addr: str = xml_field("NumberOfAddr")
    ipv6_prefix_preferred_life_time: str = xml_field("ipv6PrefixPreferredLifeTime")
    ipv6_prefix_valid_life_time: str = xml_field("ipv6PrefixValidLifeTime")
    dhcpv6_addr_life_time: str = xml_field("dhcpV6AddrLifeTime")
    ipv6_ra_lifetime: str = xml_field("ipv6RALifetime")
    ipv6_ra_intervaltime: str = xml_field("ipv6RAIntervaltime")


@dataclass
class BasicDHCPReserveIPAddrs:
    mac_address: str = xml_field("MacAddress")
    leased_ip: str = xml_field("LeasedIP")


@dataclass
class BasicDHCP(Record):
    """fn=105"""
    enable_dhcpv4: str = xml_field("enableDHCPv4")
    addr_start: str = xml_field("Addr_start")
    number_of_cpes: str = xml_field("NumberOfCpes")
    lease_time: str = xml_field("LeaseTime")
    lan_ip: str = xml_field("LanIP")
    subnet_mask: str = xml_field("subnetmask")
    reserve_ip_addrs: List[BasicDHCPReserveIPAddrs] = xml_list("ReserveIpadrr")
    block_subnet_ip: List[str] = xml_list("BlockSubnetIP")
    block_subnet_mask: List[str] = xml_list("BlockSubnetMask")
    hide_customer_dhcp_lan_change: str = xml_field("HideCustomerDhcpLanChange")


@dataclass
class WANSetting(Record):
    """fn=107"""
    napt_mode: str = xml_field("NAPT_mode")
    wan_mac: str = xml_field("WanMAC")
    wan_ipv6_addrs: List[str] = xml_list("wan_ipv6_addr/wan_ipv6_addr_entry")
    wan_dhcpv6_srv: str = xml_field("WanDhcpv6Srv")
    ipv6_lease_time: str = xml_field("ipv6_LeaseTime")
    ipv6_lease_expire: str = xml_field("ipv6_LeaseExpire")
    wan_ipv6_dns_addr: List[str] = xml_list("wan_ipv6_dnsaddr/wan_ipv6_dnsaddr_entry")
    wan_ip: str = xml_field("WanIP")
    gateway_address: str = xml_field("gateway_address")
    lease_time: str = xml_field("LeaseTime")
    lease_expire: str = xml_field("LeaseExpire")
    wan_ipv4_dns_addr: List[str] = xml_list("wan_ipv4_dnsaddr/wan_ipv4_dnsaddr_entry")
    dslite_enable: str = xml_field("dslite_enable")
    dslite_fqdn: str = xml_field("dslite_fqdn")
    dslite_addr: str = xml_field("dslite_addr")


@dataclass
class IPFiltering(Record):
    """fn=109"""
    lan_ip: str = xml_field("LanIP")
    subnet_mask: str = xml_field("subnetmask")
    time_mode: str = xml_field("time_mode")
    general_time: str = xml_field("GeneralTime")
    daily_time: str = xml_field("DailyTime")


@dataclass
class IPv6Filtering(Record):
    """fn=111"""
    ipv6_prefix: str = xml_field("ipv6_prefix")
    dir: str = xml_field("dir")
    time_mode: str = xml_field("time_mode")
    general_time: str = xml_field("GeneralTime")
    daily_time: str = xml_field("DailyTime")


@dataclass
class PortTrigger(Record):
    """fn=113, no fields are decoded"""


@dataclass
class WebFilter(Record):
    """fn=115"""
    firewall_protection: str = xml_field("firewallProtection")
    block_ip_fragments: str = xml_field("blockIpFragments")
    port_scan_detection: str = xml_field("portScanDetection")
    syn_flood_detection: str = xml_field("synFloodDetection")
    icmp_flood_detection: str = xml_field("IcmpFloodDetection")
    icmp_flood_detect_rate: str = xml_field("IcmpFloodDetectRate")


@dataclass
class IPv6WebFilter(Record):
    """fn=117"""
    ipv6_firewall_protection: str = xml_field("IPv6firewallProtection")
    ipv6_block_ip_fragments: str = xml_field("IPv6blockIpFragments")
    ipv6_port_scan_detection: str = xml_field("IPv6portScanDetection")
    ipv6_syn_flood_detection: str = xml_field("IPv6synFloodDetection")
    ipv6_icmp_flood_detection: str = xml_field("IPv6IcmpFloodDetection")
    ipv6_icmp_flood_detect_rate: str = xml_field("IPv6IcmpFloodDetectRate")


@dataclass
class MACFiltering(Record):
    """fn=119"""
    max_instance: str = xml_field("maxInstance")
    time_mode: str = xml_field("time_mode")
    general_time: str = xml_field("GeneralTime")
    daily_time: str = xml_field("DailyTime")


@dataclass
class ForwardingUPnP:
    lan_ip_addr: str = xml_field("LanIPAddr")
    lan_port: str = xml_field("LanPort")
    wan_port: str = xml_field("WanPort")
    protocol: str = xml_field("Protocol")
    description: str = xml_field("Description")


@dataclass
class Forwarding(Record):
    """fn=121"""
    lan_ip: str = xml_field("LanIP")
    subnet_mask: str = xml_field("subnetmask")
    upnps: List[ForwardingUPnP] = xml_list("UPnP")


@dataclass
class LANUserTableClient:
    """One client entry, the same shape under Ethernet and WIFI"""
    interface: str = xml_field("interface")
    ipv4_addr: str = xml_field("IPv4Addr")
    xml_hostname: str = xml_field("xmlhostname")
    xml_icon: str = xml_field("xmlicon")
    index: str = xml_field("index")
    interface_id: str = xml_field("interfaceid")
    hostname: str = xml_field("hostname")
    mac_addr: str = xml_field("MACAddr")
    method: str = xml_field("method")
    lease_time: str = xml_field("leaseTime")
    speed: str = xml_field("speed")


@dataclass
class LANUserTable(Record):
    """fn=123"""
    ethernet: List[LANUserTableClient] = xml_list("Ethernet/clientinfo")
    wifi: List[LANUserTableClient] = xml_list("WIFI/clientinfo")
    total_client: str = xml_field("totalClient")
    customer: str = xml_field("Customer")


@dataclass
class DDNS(Record):
    """fn=124"""
    enable: str = xml_field("Enable")
    ddns_provider: str = xml_field("DDNSProvider")
    username: str = xml_field("Username")
    password: str = xml_field("Password")
    hostname: str = xml_field("Hostname")
    wan_ip: str = xml_field("WanIP")


@dataclass
class RemoteAccess(Record):
    """fn=131, no fields are decoded"""


@dataclass
class MTUSize(Record):
    """fn=134"""
    size: str = xml_field("size")


@dataclass
class CMState(Record):
    """fn=136, temperatures are converted to Celsius"""
    tunner_temperature: int = xml_field("TunnerTemperature", 0)
    temperature: int = xml_field("Temperature", 0)
    oper_state: str = xml_field("OperState")
    wan_ipv4_addr: str = xml_field("wan_ipv4_addr")
    wan_ipv6_addrs: List[str] = xml_list("wan_ipv6_addr/wan_ipv6_addr_entry")

    @classmethod
    def post_decode(cls, values: Dict[str, Any]) -> None:
        for name in ("tunner_temperature", "temperature"):
            values[name] = fahrenheit_to_celsius(parse_int(values[name]))


@dataclass
class WiredStatePort:
    eth: str = xml_field("Eth")
    speed: str = xml_field("Speed")


@dataclass
class WiredState1(Record):
    """fn=137"""
    ports: List[WiredStatePort] = xml_list("port")
    device: str = xml_field("Device")
    eth_flaplist_file: str = xml_field("ethflaplistFile")


@dataclass
class WiredState2(Record):
    """fn=143"""
    ports: List[WiredStatePort] = xml_list("port")
    device: str = xml_field("Device")


@dataclass
class CMStatusDownstream:
    freq: str = xml_field("freq")
    mod: str = xml_field("mod")
    chid: str = xml_field("chid")
    state: str = xml_field("state")
    status: str = xml_field("status")
    primary_settings: str = xml_field("primarySettings")


@dataclass
class CMStatusUpstream:
    usid: str = xml_field("usid")
    freq: str = xml_field("freq")
    power: str = xml_field("power")
    srate: str = xml_field("srate")
    state: str = xml_field("state")


@dataclass
class CMStatusServiceFlow:
    sfid: str = xml_field("Sfid")
    direction: str = xml_field("direction")
    p_max_traffic_rate: str = xml_field("pMaxTrafficRate")
    p_max_traffic_burst: str = xml_field("pMaxTrafficBurst")
    p_min_reserved_rate: str = xml_field("pMinReservedRate")
    p_max_concat_burst: str = xml_field("pMaxConcatBurst")
    p_scheduling_type: str = xml_field("pSchedulingType")


@dataclass
class CMStatus(Record):
    """fn=144"""
    provisioning_st: str = xml_field("provisioning_st")
    provisioning_st_num: str = xml_field("provisioning_st_num")
    cm_comment: str = xml_field("cm_comment")
    ds_num: str = xml_field("ds_num")
    downstreams: List[CMStatusDownstream] = xml_list("downstream")
    us_num: str = xml_field("us_num")
    upstreams: List[CMStatusUpstream] = xml_list("upstream")
    cm_docsis_mode: str = xml_field("cm_docsis_mode")
    cm_network_access: str = xml_field("cm_network_access")
    number_of_cpes: str = xml_field("NumberOfCpes")
    d_max_cpes: str = xml_field("dMaxCpes")
    bpi_enable: str = xml_field("bpiEnable")
    file_name: str = xml_field("FileName")
    service_flows: List[CMStatusServiceFlow] = xml_list("serviceflow")


@dataclass
class EthFlaplist(Record):
    """fn=147"""
    eth_flaplist_file: str = xml_field("ethflaplistFile")


@dataclass
class WirelessBasic1(Record):
    """fn=300"""
    nv_country: str = xml_field("NvCountry")
    bandmode: str = xml_field("Bandmode")
    channel_range: str = xml_field("ChannelRange")
    bss_enable_2g: str = xml_field("BssEnable2g")
    ssid_2g: str = xml_field("SSID2G")
    hide_network_2g: str = xml_field("HideNetwork2G")
    band_width_2g: str = xml_field("BandWidth2G")
    bss_coexistence: str = xml_field("BssCoexistence")
    transmission_rate_2g: str = xml_field("TransmissionRate2g")
    transmission_mode_2g: str = xml_field("TransmissionMode2g")
    security_mode_2g: str = xml_field("SecurityMode2g")
    multicast_rate_2g: str = xml_field("MulticastRate2G")
    channel_setting_2g: str = xml_field("ChannelSetting2G")
    current_channel_2g: str = xml_field("CurrentChannel2G")
    pre_shared_key_2g: str = xml_field("PreSharedKey2g")
    group_rekey_interval_2g: str = xml_field("GroupRekeyInterval2g")
    wpa_algorithm_2g: str = xml_field("WpaAlgorithm2G")
    son_admin_status: str = xml_field("SONAdminStatus")
    son_operational_status: str = xml_field("SONOperationalStatus")
    bss_enable_5g: str = xml_field("BssEnable5g")
    ssid_5g: str = xml_field("SSID5G")
    hide_network_5g: str = xml_field("HideNetwork5G")
    band_width_5g: str = xml_field("BandWidth5G")
    transmission_rate_5g: str = xml_field("TransmissionRate5g")
    transmission_mode_5g: str = xml_field("TransmissionMode5g")
    security_mode_5g: str = xml_field("SecurityMode5g")
    multicast_rate_5g: str = xml_field("MulticastRate5G")
    channel_setting_5g: str = xml_field("ChannelSetting5G")
    current_channel_5g: str = xml_field("CurrentChannel5G")
    pre_shared_key_5g: str = xml_field("PreSharedKey5g")
    group_rekey_interval_5g: str = xml_field("GroupRekeyInterval5g")
    wpa_algorithm_5g: str = xml_field("WpaAlgorithm5G")


@dataclass
class WirelessWmm(Record):
    """fn=302"""
    wmm_2g: str = xml_field("WMM2G")
    apsd_2g: str = xml_field("Apsd2G")
    transmission_mode_2g: str = xml_field("TransmissionMode2g")
    wmm_5g: str = xml_field("WMM5G")
    apsd_5g: str = xml_field("Apsd5G")
    transmission_mode_5g: str = xml_field("TransmissionMode5g")


@dataclass
class WirelessSiteSurvey(Record):
    """fn=305"""
    count_2g: str = xml_field("count2G")
    count_5g: str = xml_field("count5G")
    band_mode_24g: str = xml_field("BandMode_2_4G")
    band_mode_5g: str = xml_field("BandMode_5G")


@dataclass
class WirelessGuestNetwork1Interface:
    enable_2g: str = xml_field("Enable2G")
    bssid_2g: str = xml_field("BSSID2G")
    guest_mac_2g: str = xml_field("GuestMac2G")
    hide_network_2g: str = xml_field("HideNetwork2G")
    security_mode_2g: str = xml_field("SecurityMode2g")
    pre_shared_key_2g: str = xml_field("PreSharedKey2g")
    group_rekey_interval_2g: str = xml_field("GroupRekeyInterval2g")
    wpa_algorithm_2g: str = xml_field("WpaAlgorithm2G")


@dataclass
class WirelessGuestNetwork1Interface5G:
    enable_5g: str = xml_field("Enable5G")
    bssid_5g: str = xml_field("BSSID5G")
    guest_mac_5g: str = xml_field("GuestMac5G")
    hide_network_5g: str = xml_field("HideNetwork5G")
    security_mode_5g: str = xml_field("SecurityMode5g")
    pre_shared_key_5g: str = xml_field("PreSharedKey5g")
    group_rekey_interval_5g: str = xml_field("GroupRekeyInterval5g")
    wpa_algorithm_5g: str = xml_field("WpaAlgorithm5G")


@dataclass
class WirelessGuestNetwork1(Record):
    """fn=307"""
    main_enable_2g: str = xml_field("MainEnable2G")
    main_enable_5g: str = xml_field("MainEnable5G")
    interfaces: List[WirelessGuestNetwork1Interface] = xml_list("Interface")
    interfaces_5g: List[WirelessGuestNetwork1Interface5G] = xml_list("Interface5G")


@dataclass
class CMWirelessWPS1(Record):
    """fn=309"""
    main_enable_2g: str = xml_field("MainEnable2g")
    main_enable_5g: str = xml_field("MainEnable5g")
    wps_enable_24g: str = xml_field("WpsEnable24G")
    wps_enable_5g: str = xml_field("WpsEnable5G")
    wps_method_24g: str = xml_field("WpsMethod24G")
    wps_method_5g: str = xml_field("WpsMethod5G")
    wps_ap_pin_24g: str = xml_field("WpsAPPIN24G")
    wps_ap_pin_5g: str = xml_field("WpsAPPIN5G")
    wps_pin_num_24g: str = xml_field("WpsPINNUM24G")
    wps_pin_num_5g: str = xml_field("WpsPINNUM5G")
    wps_enable_pbc: str = xml_field("WpsEnablePBC")
    wps_enable_pin: str = xml_field("WpsEnablePIN")
    wps_enable_pbc_5g: str = xml_field("WpsEnablePBC5G")
    wps_enable_pin_5g: str = xml_field("WpsEnablePIN5G")


@dataclass
class CMWirelessAccessControlBSSAccessEntry:
    access_station: str = xml_field("AccessStation")
    access_device_name: str = xml_field("AccessDeviceName")


@dataclass
class CMWirelessAccessControlBSSAccessEntry5G:
    access_station_5g: str = xml_field("AccessStation5G")
    access_device_name_5g: str = xml_field("AccessDeviceName5G")


@dataclass
class CMWirelessAccessControl(Record):
    """fn=311"""
    band_mode: str = xml_field("BandMode")
    bss_enable_2g: str = xml_field("BssEnable2g")
    bss_enable_5g: str = xml_field("BssEnable5g")
    ssid_2g: str = xml_field("SSID2G")
    ssid_5g: str = xml_field("SSID5G")
    hide_network_2g: str = xml_field("HideNetwork2G")
    hide_network_5g: str = xml_field("HideNetwork5G")
    security_mode_2g: str = xml_field("SecurityMode2g")
    security_mode_5g: str = xml_field("SecurityMode5g")
    pre_shared_key_2g: str = xml_field("PreSharedKey2g")
    pre_shared_key_5g: str = xml_field("PreSharedKey5g")
    wpa_algorithm_2g: str = xml_field("WpaAlgorithm2G")
    wpa_algorithm_5g: str = xml_field("WpaAlgorithm5G")
    access_mode_24g: str = xml_field("AccessMode24G")
    access_mode_5g: str = xml_field("AccessMode5G")
    bss_access_entries: List[CMWirelessAccessControlBSSAccessEntry] = xml_list("BssAccessEntry")
    bss_access_entries_5g: List[CMWirelessAccessControlBSSAccessEntry5G] = xml_list("BssAccessEntry5G")


@dataclass
class ChannelMapBandMode24G:
    w2gch1: str = xml_field("W2GCH1")
    w2gch2: str = xml_field("W2GCH2")
    w2gch3: str = xml_field("W2GCH3")
    w2gch4: str = xml_field("W2GCH4")
    w2gch5: str = xml_field("W2GCH5")
    w2gch6: str = xml_field("W2GCH6")
    w2gch7: str = xml_field("W2GCH7")
    w2gch8: str = xml_field("W2GCH8")
    w2gch9: str = xml_field("W2GCH9")
    w2gch10: str = xml_field("W2GCH10")
    w2gch11: str = xml_field("W2GCH11")
    w2gch12: str = xml_field("W2GCH12")
    w2gch13: str = xml_field("W2GCH13")
    maxaxis_2g: str = xml_field("maxaxis2G")
    total_2g: str = xml_field("total2g")


@dataclass
class ChannelMapBandMode5G:
    w5gch1: str = xml_field("W5GCH1")
    w5gch2: str = xml_field("W5GCH2")
    w5gch3: str = xml_field("W5GCH3")
    w5gch4: str = xml_field("W5GCH4")
    w5gch5: str = xml_field("W5GCH5")
    w5gch6: str = xml_field("W5GCH6")
    w5gch7: str = xml_field("W5GCH7")
    w5gch8: str = xml_field("W5GCH8")
    w5gch9: str = xml_field("W5GCH9")
    w5gch10: str = xml_field("W5GCH10")
    w5gch11: str = xml_field("W5GCH11")
    w5gch12: str = xml_field("W5GCH12")
    w5gch13: str = xml_field("W5GCH13")
    w5gch14: str = xml_field("W5GCH14")
    w5gch15: str = xml_field("W5GCH15")
    w5gch16: str = xml_field("W5GCH16")
    w5gch17: str = xml_field("W5GCH17")
    w5gch18: str = xml_field("W5GCH18")
    w5gch19: str = xml_field("W5GCH19")
    maxaxis_5g: str = xml_field("maxaxis5G")
    total_5g: str = xml_field("total5g")


@dataclass
class ChannelMap(Record):
    """fn=313"""
    count_2g: str = xml_field("count2G")
    my_current_channel_2g: str = xml_field("MyCurrentChannel2G")
    count_5g: str = xml_field("count5G")
    my_current_channel_5g: str = xml_field("MyCurrentChannel5G")
    band_mode_24g: ChannelMapBandMode24G = xml_record("BandMode_2_4G", ChannelMapBandMode24G)
    band_mode_5g: ChannelMapBandMode5G = xml_record("BandMode_5G", ChannelMapBandMode5G)


@dataclass
class WirelessBasic2(Record):
    """fn=315"""
    bandmode: str = xml_field("Bandmode")
    bss_enable_2g: str = xml_field("BssEnable2g")
    bss_enable_5g: str = xml_field("BssEnable5g")
    wifi_chip_status: str = xml_field("WiFi_chip_status")
    cm_status: str = xml_field("cm_status")


@dataclass
class WirelessGuestNetwork2Interface:
    main_enable_2g: str = xml_field("MainEnable2G")
    enable_2g: str = xml_field("Enable2G")
    bssid_2g: str = xml_field("BSSID2G")
    guest_mac_2g: str = xml_field("GuestMac2G")
    hide_network_2g: str = xml_field("HideNetwork2G")
    security_mode_2g: str = xml_field("SecurityMode2g")
    pre_shared_key_2g: str = xml_field("PreSharedKey2g")
    group_rekey_interval_2g: str = xml_field("GroupRekeyInterval2g")
    wpa_algorithm_2g: str = xml_field("WpaAlgorithm2G")


@dataclass
class WirelessGuestNetwork2Interface5G:
    main_enable_5g: str = xml_field("MainEnable5G")
    enable_5g: str = xml_field("Enable5G")
    bssid_5g: str = xml_field("BSSID5G")
    guest_mac_5g: str = xml_field("GuestMac5G")
    hide_network_5g: str = xml_field("HideNetwork5G")
    security_mode_5g: str = xml_field("SecurityMode5g")
    pre_shared_key_5g: str = xml_field("PreSharedKey5g")
    group_rekey_interval_5g: str = xml_field("GroupRekeyInterval5g")
    wpa_algorithm_5g: str = xml_field("WpaAlgorithm5G")


@dataclass
class WirelessGuestNetwork2(Record):
    """fn=317"""
    year: str = xml_field("year")
    mouth: str = xml_field("mouth")
    day: str = xml_field("day")
    hour: str = xml_field("hour")
    minute: str = xml_field("minute")
    interface: WirelessGuestNetwork2Interface = xml_record(
        "Interface", WirelessGuestNetwork2Interface)
    interface_5g: WirelessGuestNetwork2Interface5G = xml_record(
        "Interface5G", WirelessGuestNetwork2Interface5G)


@dataclass
class WirelessClientInfo:
    """One associated station, the same shape on both bands"""
    ssid: str = xml_field("SSID")
    mac: str = xml_field("MAC")
    phy_rate_tx: str = xml_field("phy_rate_tx")
    phy_rate_rx: str = xml_field("phy_rate_rx")
    phy_mode: str = xml_field("phy_mode")
    auth_mode: str = xml_field("Auth_mode")
    rssi: str = xml_field("RSSI")
    encrypt_method: str = xml_field("EncryptMethod")


@dataclass
class WirelessClientBand:
    client_info: List[WirelessClientInfo] = xml_list("clientinfo")


@dataclass
class WirelessClient(Record):
    """fn=322"""
    client_2g: List[WirelessClientBand] = xml_list("Client2G")
    client_5g: List[WirelessClientBand] = xml_list("Client5G")


@dataclass
class CMWirelessWPS2(Record):
    """fn=323"""
    wps_stat: str = xml_field("WPS_stat")
    wps_result: str = xml_field("WPS_result")


@dataclass
class DefaultValue(Record):
    """fn=324"""
    login_pwd: str = xml_field("loginPwd")
    wifi_ssid: str = xml_field("WiFiSSID")
    wifi_key: str = xml_field("WiFikey")


@dataclass
class GstRandomPassword(Record):
    """fn=325"""
    pre_shared_key: str = xml_field("PreSharedKey")


@dataclass
class WIFIState(Record):
    """fn=326"""
    primary_24g: str = xml_field("primary24g")
    primary_5g: str = xml_field("primary5g")


@dataclass
class WirelessResetting(Record):
    """fn=328"""
    is_wireless_resetting: str = xml_field("isWirelessResetting")


# Getter function code -> response record
RESPONSE_TYPES: Dict[str, Type[Record]] = {
    FN_GLOBAL_SETTINGS: GlobalSettings,
    FN_CM_SYSTEM_INFO: CMSystemInfo,
    FN_MULTILANG: Multilang,
    FN_STATUS: Status,
    FN_CONFIGURATION: Configuration,
    FN_DOWNSTREAM_TABLE: DownstreamTable,
    FN_UPSTREAM_TABLE: UpstreamTable,
    FN_SIGNAL_TABLE: SignalTable,
    FN_EVENT_LOG_TABLE: EventLogTable,
    FN_FIREWALL_LOG_TABLE: FirewallLogTable,
    FN_LANGSETLIST: Langsetlist,
    FN_FAIL: Fail,
    FN_LOGIN_TIMER: LoginTimer,
    FN_LAN_SETTING: LANSetting,
    FN_DHCPV6_INFO: DHCPv6Info,
    FN_BASIC_DHCP: BasicDHCP,
    FN_WAN_SETTING: WANSetting,
    FN_IP_FILTERING: IPFiltering,
    FN_IPV6_FILTERING: IPv6Filtering,
    FN_PORT_TRIGGER: PortTrigger,
    FN_WEB_FILTER: WebFilter,
    FN_IPV6_WEB_FILTER: IPv6WebFilter,
    FN_MAC_FILTERING: MACFiltering,
    FN_FORWARDING: Forwarding,
    FN_LAN_USER_TABLE: LANUserTable,
    FN_DDNS: DDNS,
    FN_REMOTE_ACCESS: RemoteAccess,
    FN_MTU_SIZE: MTUSize,
    FN_CM_STATE: CMState,
    FN_WIRED_STATE_1: WiredState1,
    FN_WIRED_STATE_2: WiredState2,
    FN_CM_STATUS: CMStatus,
    FN_ETH_FLAPLIST: EthFlaplist,
    FN_WIRELESS_BASIC_1: WirelessBasic1,
    FN_WIRELESS_WMM: WirelessWmm,
    FN_WIRELESS_SITE_SURVEY: WirelessSiteSurvey,
    FN_WIRELESS_GUEST_NETWORK_1: WirelessGuestNetwork1,
    FN_CM_WIRELESS_WPS_1: CMWirelessWPS1,
    FN_CM_WIRELESS_ACCESS_CONTROL: CMWirelessAccessControl,
    FN_CHANNEL_MAP: ChannelMap,
    FN_WIRELESS_BASIC_2: WirelessBasic2,
    FN_WIRELESS_GUEST_NETWORK_2: WirelessGuestNetwork2,
    FN_WIRELESS_CLIENT: WirelessClient,
    FN_CM_WIRELESS_WPS_2: CMWirelessWPS2,
    FN_DEFAULT_VALUE: DefaultValue,
    FN_GST_RANDOM_PASSWORD: GstRandomPassword,
    FN_WIFI_STATE: WIFIState,
    FN_WIRELESS_RESETTING: WirelessResetting,
}
