"""Tests for the getter.xml response records and value transforms."""

import textwrap
import xml.etree.ElementTree as ET
from dataclasses import dataclass, is_dataclass
from typing import List

import pytest

from connectbox.exceptions import DecodeError
from connectbox.functions import FN_CM_STATE, FN_CM_SYSTEM_INFO, FN_LOGIN, FN_LOGOUT
from connectbox.router_types import (
    RESPONSE_TYPES,
    BasicDHCP,
    BasicDHCPReserveIPAddrs,
    ChannelMap,
    CMState,
    CMSystemInfo,
    DownstreamTable,
    GlobalSettings,
    Langsetlist,
    LANUserTable,
    PortTrigger,
    Record,
    WANSetting,
    WiredState1,
    WiredStatePort,
    WirelessClient,
    WirelessGuestNetwork2,
    decode,
    fahrenheit_to_celsius,
    parse_duration,
    parse_int,
    xml_field,
    xml_list,
)


def parse(shape, xml):
    return decode(textwrap.dedent(xml).strip().encode(), shape)


# ---------------------------------------------------------------------------
# Value transforms
# ---------------------------------------------------------------------------


class TestParseDuration:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("10day(s)20h:15m:30s", 936930),
            ("0day(s)0h:0m:30s", 30),
            ("4day(s)16h:30m:35s", 405035),
            ("0h:1m:0s", 60),
            ("uptime 1day(s)0h:0m:0s", 86400),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "hello", "10 days", "1h:2m"])
    def test_invalid(self, value):
        with pytest.raises(DecodeError, match="invalid duration string"):
            parse_duration(value)


class TestFahrenheitToCelsius:
    @pytest.mark.parametrize(
        "fahrenheit,celsius",
        [(50, 10), (-50, -45), (32, 0), (212, 100), (80, 26), (59, 15), (0, -17)],
    )
    def test_truncates_toward_zero(self, fahrenheit, celsius):
        assert fahrenheit_to_celsius(fahrenheit) == celsius


class TestParseInt:
    def test_empty_is_zero(self):
        assert parse_int("") == 0
        assert parse_int("  ") == 0

    def test_whitespace_stripped(self):
        assert parse_int(" 42\n") == 42

    def test_invalid(self):
        with pytest.raises(DecodeError, match="invalid integer"):
            parse_int("warm")


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------


@dataclass
class Sample:
    name: str = xml_field("name")
    count: int = xml_field("count", 0)
    tags: List[str] = xml_list("tag")


class TestDecode:
    def test_root_tag_not_checked(self):
        data = parse(Sample, "<anything><name>x</name></anything>")
        assert data.name == "x"

    def test_missing_elements_use_defaults(self):
        data = parse(Sample, "<root/>")
        assert data == Sample(name="", count=0, tags=[])

    def test_last_scalar_wins(self):
        data = parse(Sample, "<root><name>a</name><name>b</name></root>")
        assert data.name == "b"

    def test_list_keeps_document_order(self):
        data = parse(Sample, "<root><tag>b</tag><name>n</name><tag>a</tag><tag/></root>")
        assert data.tags == ["b", "a", ""]

    def test_int_field(self):
        assert parse(Sample, "<root><count>7</count></root>").count == 7
        assert parse(Sample, "<root><count></count></root>").count == 0

    def test_invalid_int(self):
        with pytest.raises(DecodeError, match="invalid integer"):
            parse(Sample, "<root><count>many</count></root>")

    def test_malformed_xml(self):
        with pytest.raises(DecodeError):
            decode(b"<?xml", Sample)

    @pytest.mark.parametrize("encoding", ["bogus", "shift_jis"])
    def test_unsupported_encoding(self, encoding):
        body = f'<?xml version="1.0" encoding="{encoding}"?><root/>'.encode()
        with pytest.raises(DecodeError):
            decode(body, Sample)

    def test_str_body(self):
        assert decode("<root><name>s</name></root>", Sample).name == "s"

    def test_not_a_dataclass(self):
        with pytest.raises(TypeError):
            decode(b"<root/>", dict)

    def test_from_xml(self):
        root = ET.fromstring("<cmstate><Temperature>212</Temperature></cmstate>")
        assert CMState.from_xml(root).temperature == 100


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class TestRecords:
    def test_global_settings(self):
        data = parse(GlobalSettings, """
            <?xml version="1.0" encoding="utf-8"?>
            <GlobalSettings>
              <AccessLevel>1</AccessLevel>
              <SwVersion>CH7465LG-NCIP-6.12.18.24-5p8-NOSH</SwVersion>
              <CmProvisionMode>Dual IP Stack</CmProvisionMode>
              <DsLite>0</DsLite>
              <GwProvisionMode>Dual IP Stack</GwProvisionMode>
              <GWOperMode>IPv4</GWOperMode>
              <ConfigVenderModel>CH7465LG</ConfigVenderModel>
              <OperatorId>UPCCH</OperatorId>
              <AccessDenied>NONE</AccessDenied>
              <LockedOut>Disable</LockedOut>
              <CountryID>7</CountryID>
              <title>Connect Box</title>
              <Interface>1</Interface>
              <operStatus>1</operStatus>
            </GlobalSettings>
        """)
        assert data.access_level == "1"
        assert data.sw_version == "CH7465LG-NCIP-6.12.18.24-5p8-NOSH"
        assert data.gw_oper_mode == "IPv4"
        assert data.operator_id == "UPCCH"
        assert data.title == "Connect Box"
        assert data.show_ddns == ""

    def test_cm_system_info(self):
        data = parse(CMSystemInfo, """
            <?xml version="1.0" encoding="utf-8"?>
            <cm_system_info>
              <cm_docsis_mode>DOCSIS 3.0</cm_docsis_mode>
              <cm_hardware_version>5.01</cm_hardware_version>
              <cm_mac_addr>00:11:22:33:44:55</cm_mac_addr>
              <cm_serial_number>AAAP12345678</cm_serial_number>
              <cm_system_uptime>4day(s)16h:30m:35s</cm_system_uptime>
              <cm_network_access>Allowed</cm_network_access>
            </cm_system_info>
        """)
        assert data.docsis_mode == "DOCSIS 3.0"
        assert data.mac_addr == "00:11:22:33:44:55"
        assert data.system_uptime == 405035
        assert data.network_access == "Allowed"

    def test_cm_system_info_without_uptime(self):
        with pytest.raises(DecodeError, match="invalid duration string"):
            parse(CMSystemInfo, "<cm_system_info><cm_docsis_mode>x</cm_docsis_mode></cm_system_info>")

    def test_downstream_table(self):
        data = parse(DownstreamTable, """
            <downstream_table>
              <ds_num>2</ds_num>
              <downstream>
                <freq>570000000</freq>
                <pow>7</pow>
                <snr>40</snr>
                <mod>256qam</mod>
                <chid>10</chid>
                <RxMER>40.366</RxMER>
                <PreRs>13</PreRs>
                <PostRs>0</PostRs>
                <IsQamLocked>1</IsQamLocked>
                <IsFECLocked>1</IsFECLocked>
                <IsMpegLocked>1</IsMpegLocked>
              </downstream>
              <downstream>
                <freq>474000000</freq>
                <pow>7</pow>
                <snr>40</snr>
                <mod>256qam</mod>
                <chid>1</chid>
              </downstream>
            </downstream_table>
        """)
        assert data.ds_num == "2"
        assert len(data.downstreams) == 2
        assert data.downstreams[0].freq == "570000000"
        assert data.downstreams[0].rx_mer == "40.366"
        assert data.downstreams[0].is_mpeg_locked == "1"
        assert data.downstreams[1].chid == "1"
        assert data.downstreams[1].pre_rs == ""

    def test_langsetlist(self):
        data = parse(Langsetlist, """
            <langsetlist>
              <langSet_support>en</langSet_support>
              <langSet_support>cz</langSet_support>
              <langSet_support>pl</langSet_support>
              <langSet_support>sk</langSet_support>
              <langSet_support>fr</langSet_support>
              <langSet_support>it</langSet_support>
            </langsetlist>
        """)
        assert data.lang_set_support == ["en", "cz", "pl", "sk", "fr", "it"]

    def test_basic_dhcp(self):
        data = parse(BasicDHCP, """
            <basicDHCP>
              <enableDHCPv4>1</enableDHCPv4>
              <Addr_start>192.168.0.10</Addr_start>
              <NumberOfCpes>245</NumberOfCpes>
              <LeaseTime>604800</LeaseTime>
              <LanIP>192.168.0.1</LanIP>
              <subnetmask>255.255.255.0</subnetmask>
              <ReserveIpadrr>
                <MacAddress>00:11:22:33:44:55</MacAddress>
                <LeasedIP>192.168.0.20</LeasedIP>
              </ReserveIpadrr>
              <ReserveIpadrr>
                <MacAddress>66:77:88:99:AA:BB</MacAddress>
                <LeasedIP>192.168.0.21</LeasedIP>
              </ReserveIpadrr>
              <BlockSubnetIP>192.168.100.0</BlockSubnetIP>
              <BlockSubnetIP>192.168.200.0</BlockSubnetIP>
              <BlockSubnetMask>255.255.255.0</BlockSubnetMask>
              <BlockSubnetMask>255.255.0.0</BlockSubnetMask>
            </basicDHCP>
        """)
        assert data.enable_dhcpv4 == "1"
        assert data.reserve_ip_addrs == [
            BasicDHCPReserveIPAddrs("00:11:22:33:44:55", "192.168.0.20"),
            BasicDHCPReserveIPAddrs("66:77:88:99:AA:BB", "192.168.0.21"),
        ]
        assert data.block_subnet_ip == ["192.168.100.0", "192.168.200.0"]
        assert data.block_subnet_mask == ["255.255.255.0", "255.255.0.0"]

    def test_wan_setting(self):
        data = parse(WANSetting, """
            <wan_setting>
              <NAPT_mode>1</NAPT_mode>
              <WanMAC>00:11:22:33:44:56</WanMAC>
              <wan_ipv6_addr>
                <wan_ipv6_addr_entry>2001:db8::1/128</wan_ipv6_addr_entry>
                <wan_ipv6_addr_entry>fe80::1/64</wan_ipv6_addr_entry>
              </wan_ipv6_addr>
              <wan_ipv6_dnsaddr>
                <wan_ipv6_dnsaddr_entry>2001:db8::53</wan_ipv6_dnsaddr_entry>
              </wan_ipv6_dnsaddr>
              <WanIP>203.0.113.7</WanIP>
              <wan_ipv4_dnsaddr>
                <wan_ipv4_dnsaddr_entry>198.51.100.1</wan_ipv4_dnsaddr_entry>
                <wan_ipv4_dnsaddr_entry>198.51.100.2</wan_ipv4_dnsaddr_entry>
              </wan_ipv4_dnsaddr>
            </wan_setting>
        """)
        assert data.wan_ipv6_addrs == ["2001:db8::1/128", "fe80::1/64"]
        assert data.wan_ipv6_dns_addr == ["2001:db8::53"]
        assert data.wan_ip == "203.0.113.7"
        assert data.wan_ipv4_dns_addr == ["198.51.100.1", "198.51.100.2"]
        assert data.dslite_enable == ""

    def test_lan_user_table(self):
        data = parse(LANUserTable, """
            <LanUserTable>
              <Ethernet>
                <clientinfo>
                  <interface>Ethernet 1</interface>
                  <IPv4Addr>192.168.0.100/24</IPv4Addr>
                  <index>0</index>
                  <interfaceid>2</interfaceid>
                  <hostname>Unknown</hostname>
                  <MACAddr>00:11:22:33:44:77</MACAddr>
                  <method>1</method>
                  <leaseTime>00:02:10:22</leaseTime>
                  <speed>1000</speed>
                </clientinfo>
                <clientinfo>
                  <interface>Ethernet 2</interface>
                  <IPv4Addr>192.168.0.101/24</IPv4Addr>
                  <hostname>nas</hostname>
                </clientinfo>
              </Ethernet>
              <WIFI>
                <clientinfo>
                  <interface>Wi-Fi 5G</interface>
                  <IPv4Addr>192.168.0.150/24</IPv4Addr>
                  <hostname>phone</hostname>
                  <speed>866</speed>
                </clientinfo>
              </WIFI>
              <totalClient>9</totalClient>
              <Customer>upc</Customer>
            </LanUserTable>
        """)
        assert len(data.ethernet) == 2
        assert data.ethernet[0].hostname == "Unknown"
        assert data.ethernet[0].mac_addr == "00:11:22:33:44:77"
        assert data.ethernet[0].lease_time == "00:02:10:22"
        assert data.ethernet[1].hostname == "nas"
        assert [c.hostname for c in data.wifi] == ["phone"]
        assert data.wifi[0].speed == "866"
        assert data.total_client == "9"
        assert data.customer == "upc"

    def test_cm_state(self):
        data = parse(CMState, """
            <cmstate>
              <TunnerTemperature>80</TunnerTemperature>
              <Temperature>59</Temperature>
              <OperState>OPERATIONAL</OperState>
              <wan_ipv4_addr>203.0.113.7</wan_ipv4_addr>
              <wan_ipv6_addr>
                <wan_ipv6_addr_entry>2001:db8::1/128</wan_ipv6_addr_entry>
              </wan_ipv6_addr>
            </cmstate>
        """)
        assert data.tunner_temperature == 26
        assert data.temperature == 15
        assert data.oper_state == "OPERATIONAL"
        assert data.wan_ipv6_addrs == ["2001:db8::1/128"]

    def test_cm_state_missing_temperature(self):
        data = parse(CMState, "<cmstate><OperState>x</OperState></cmstate>")
        # Empty text is 0F
        assert data.temperature == -17

    def test_cm_state_invalid_temperature(self):
        with pytest.raises(DecodeError):
            parse(CMState, "<cmstate><Temperature>hot</Temperature></cmstate>")

    def test_wired_state(self):
        data = parse(WiredState1, """
            <wired_state>
              <port />
              <port />
              <port>
                <Eth>3</Eth>
                <Speed>1000</Speed>
              </port>
              <port>
                <Eth>4</Eth>
                <Speed>1000</Speed>
              </port>
              <Device>2</Device>
              <ethflaplistFile>Fail</ethflaplistFile>
            </wired_state>
        """)
        assert data.ports == [
            WiredStatePort(),
            WiredStatePort(),
            WiredStatePort("3", "1000"),
            WiredStatePort("4", "1000"),
        ]
        assert data.device == "2"
        assert data.eth_flaplist_file == "Fail"

    def test_port_trigger_ignores_content(self):
        data = parse(PortTrigger, "<PortTrigger><entry>1</entry></PortTrigger>")
        assert data == PortTrigger()

    def test_channel_map_nested(self):
        data = parse(ChannelMap, """
            <channelmap>
              <count2G>3</count2G>
              <MyCurrentChannel2G>6</MyCurrentChannel2G>
              <BandMode_2_4G>
                <W2GCH1>2</W2GCH1>
                <W2GCH6>1</W2GCH6>
                <maxaxis2G>5</maxaxis2G>
              </BandMode_2_4G>
            </channelmap>
        """)
        assert data.count_2g == "3"
        assert data.band_mode_24g.w2gch1 == "2"
        assert data.band_mode_24g.w2gch6 == "1"
        assert data.band_mode_24g.maxaxis_2g == "5"
        # Absent nested element decodes to an empty record
        assert data.band_mode_5g.w5gch1 == ""

    def test_wireless_guest_network_2(self):
        data = parse(WirelessGuestNetwork2, """
            <WirelessGuestNetwork2>
              <year>2020</year>
              <mouth>5</mouth>
              <day>17</day>
              <Interface>
                <MainEnable2G>1</MainEnable2G>
                <Enable2G>2</Enable2G>
                <BSSID2G>guest</BSSID2G>
                <SecurityMode2g>8</SecurityMode2g>
              </Interface>
              <Interface5G>
                <MainEnable5G>1</MainEnable5G>
                <Enable5G>2</Enable5G>
                <BSSID5G>guest5</BSSID5G>
              </Interface5G>
            </WirelessGuestNetwork2>
        """)
        assert data.year == "2020"
        assert data.mouth == "5"
        assert data.interface.bssid_2g == "guest"
        assert data.interface.security_mode_2g == "8"
        assert data.interface_5g.enable_5g == "2"
        assert data.interface_5g.bssid_5g == "guest5"

    def test_wireless_client(self):
        data = parse(WirelessClient, """
            <WirelessClient>
              <Client2G>
                <clientinfo>
                  <SSID>home</SSID>
                  <MAC>00:11:22:33:44:88</MAC>
                  <RSSI>-50</RSSI>
                </clientinfo>
                <clientinfo>
                  <SSID>home</SSID>
                  <MAC>00:11:22:33:44:99</MAC>
                </clientinfo>
              </Client2G>
              <Client5G>
                <clientinfo>
                  <SSID>home5</SSID>
                  <phy_mode>ac</phy_mode>
                </clientinfo>
              </Client5G>
            </WirelessClient>
        """)
        assert len(data.client_2g) == 1
        assert [c.mac for c in data.client_2g[0].client_info] == [
            "00:11:22:33:44:88",
            "00:11:22:33:44:99",
        ]
        assert data.client_2g[0].client_info[0].rssi == "-50"
        assert data.client_5g[0].client_info[0].phy_mode == "ac"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestResponseTypes:
    def test_all_getters_registered(self):
        assert len(RESPONSE_TYPES) == 48
        assert RESPONSE_TYPES[FN_CM_STATE] is CMState
        assert RESPONSE_TYPES[FN_CM_SYSTEM_INFO] is CMSystemInfo

    def test_records(self):
        for fn, record in RESPONSE_TYPES.items():
            assert fn.isdigit()
            assert is_dataclass(record)
            assert issubclass(record, Record)

    def test_one_record_per_function(self):
        records = list(RESPONSE_TYPES.values())
        assert len(set(records)) == len(records)

    def test_setters_not_registered(self):
        assert FN_LOGIN not in RESPONSE_TYPES
        assert FN_LOGOUT not in RESPONSE_TYPES

    @pytest.mark.parametrize("fn", sorted(RESPONSE_TYPES, key=int))
    def test_decodes_empty_document(self, fn):
        record = RESPONSE_TYPES[fn]
        if record is CMSystemInfo:
            with pytest.raises(DecodeError, match="invalid duration string"):
                decode(b"<root/>", record)
        else:
            assert isinstance(decode(b"<root/>", record), record)
