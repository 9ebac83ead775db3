#!/usr/bin/env python3
"""
ConnectBox Router API Wrapper

Python client for the XML API of Compal ConnectBox cable routers.

All reads go through ``/xml/getter.xml`` and all writes through
``/xml/setter.xml``; a numeric function code picks the operation. The
router rotates a ``sessionToken`` cookie on every response and expects
the latest value as the first form field of the next request, so the
client refreshes its token after each round trip.

A client holds one session and is not safe to share between threads:
two requests in flight would race on the token. Use one client per
thread, each with its own login.

Usage:
    from connectbox import ConnectBoxAPI

    with ConnectBoxAPI("192.168.0.1", "admin", "password") as api:
        info = api.get_cm_system_info()
        print(f"Uptime: {info.system_uptime}s")

        state = api.get_cm_state()
        print(f"Temperature: {state.temperature}C")

        hosts = api.get_lan_user_table()
        print(f"Clients: {len(hosts.ethernet) + len(hosts.wifi)}")
"""

import ipaddress
import logging
import re
import urllib.request
from http.cookiejar import eff_request_host
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Type, TypeVar
from urllib.parse import urlparse

import requests
import urllib3
from requests.cookies import remove_cookie_by_name
from urllib3.exceptions import InsecureRequestWarning

from .exceptions import (
    ConnectBoxError,
    DecodeError,
    InvalidAddressError,
    LoginError,
    ResponseStatusError,
    TransportError,
)
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
    FN_LOGIN,
    FN_LOGIN_TIMER,
    FN_LOGOUT,
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
from .router_auth import (
    DEFAULT_TIMEOUT,
    Credentials,
    CredentialStore,
    hash_password,
    load_env_config,
)
from .router_types import (
    DDNS,
    RESPONSE_TYPES,
    BasicDHCP,
    ChannelMap,
    CMState,
    CMStatus,
    CMSystemInfo,
    CMWirelessAccessControl,
    CMWirelessWPS1,
    CMWirelessWPS2,
    Configuration,
    DefaultValue,
    DHCPv6Info,
    DownstreamTable,
    EthFlaplist,
    EventLogTable,
    Fail,
    FirewallLogTable,
    Forwarding,
    GlobalSettings,
    GstRandomPassword,
    IPFiltering,
    IPv6Filtering,
    IPv6WebFilter,
    LANSetting,
    LANUserTable,
    Langsetlist,
    LoginTimer,
    MACFiltering,
    MTUSize,
    Multilang,
    PortTrigger,
    RemoteAccess,
    SignalTable,
    Status,
    UpstreamTable,
    WANSetting,
    WebFilter,
    WIFIState,
    WiredState1,
    WiredState2,
    WirelessBasic1,
    WirelessBasic2,
    WirelessClient,
    WirelessGuestNetwork1,
    WirelessGuestNetwork2,
    WirelessResetting,
    WirelessSiteSurvey,
    WirelessWmm,
    decode,
)
from .xml_args import build_args, encode_args

# Routers may be reached over https with a self-signed certificate
urllib3.disable_warnings(InsecureRequestWarning)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Cookie names
SESSION_TOKEN_COOKIE = "sessionToken"
SESSION_ID_COOKIE = "SID"

# XML API endpoints
LOGIN_PAGE = "/common_page/login.html"
XML_GETTER = "/xml/getter.xml"
XML_SETTER = "/xml/setter.xml"

_HOSTNAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def normalize_address(address: str) -> str:
    """
    Add a scheme to the router address and strip the trailing slash

    Args:
        address: Address such as "192.168.0.1", "router:8080" or
            "https://192.168.0.1/"

    Returns:
        Base URL without trailing slash, e.g. "http://192.168.0.1"

    Raises:
        InvalidAddressError: If the result is not a valid http(s) URL
    """
    if "://" not in address:
        address = "http://" + address
    address = address.rstrip("/")

    try:
        parsed = urlparse(address)
        parsed.port  # raises ValueError on a malformed port
    except ValueError:
        raise InvalidAddressError(f"invalid address: {address}") from None

    if parsed.scheme not in ("http", "https") or not _valid_host(parsed.hostname):
        raise InvalidAddressError(f"invalid address: {address}")

    return address


def _valid_host(host: Optional[str]) -> bool:
    if not host:
        return False
    if _HOSTNAME_RE.match(host):
        return True
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def parse_sid(body: str) -> str:
    """
    Extract the session ID from a login response

    The body is a ``;`` separated list of ``key=value`` entries, e.g.
    ``success;SID=1234567``. Entries that are not exactly one key and one
    value are skipped.

    Returns:
        SID value, or an empty string if there is none
    """
    for item in body.split(";"):
        kv = item.split("=")
        if len(kv) != 2:
            continue
        if kv[0] == "SID":
            return kv[1]
    return ""


class ConnectBoxAPI:
    """Client for the ConnectBox XML API"""

    def __init__(self, address: str, username: str,
                 password: Optional[str] = None, *,
                 password_hash: Optional[str] = None,
                 timeout: float = DEFAULT_TIMEOUT,
                 verify: bool = False):
        """
        Initialize ConnectBox API

        No request is sent until login().

        Args:
            address: Router address, scheme optional (http is assumed)
            username: Username
            password: Plaintext password, hashed right away
            password_hash: SHA-256 hex digest, instead of password
            timeout: Default request timeout in seconds
            verify: Verify TLS certificates for https addresses

        Raises:
            InvalidAddressError: If the address is not a valid URL
            ValueError: If neither password nor password_hash is given
        """
        if password is None and password_hash is None:
            raise ValueError("password or password_hash is required")

        self.address = normalize_address(address)
        self.username = username
        self.password_hash = password_hash if password_hash is not None else hash_password(password)
        self.timeout = timeout

        # Rotating token, refreshed from the sessionToken cookie after each response
        self.token = ""

        # Setup session; redirects are never followed
        self.session = requests.Session()
        self.session.verify = verify

        # Domain the cookie jar files this router's host-only cookies under
        _, self._cookie_domain = eff_request_host(urllib.request.Request(self.address))

    def __repr__(self) -> str:
        return f"ConnectBoxAPI(address={self.address!r}, username={self.username!r})"

    def __enter__(self) -> "ConnectBoxAPI":
        try:
            self.login()
        except ConnectBoxError:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            self.logout()
        except ConnectBoxError as e:
            if exc_type is None:
                raise
            logger.warning("Logout from %s failed: %s", self.address, e)
        finally:
            self.close()

    # ========================================================================
    # Convenience Constructors
    # ========================================================================

    @classmethod
    def from_env(cls) -> 'ConnectBoxAPI':
        """
        Create API instance using environment variables

        Environment variables:
            CONNECTBOX_ADDRESS: Router address (default: 192.168.0.1)
            CONNECTBOX_USERNAME: Username (default: admin)
            CONNECTBOX_PASSWORD: Password (required)
            CONNECTBOX_TIMEOUT: Request timeout in seconds (default: 10)

        Returns:
            ConnectBoxAPI instance, not yet logged in

        Raises:
            ValueError: If required environment variables are not set

        Example:
            >>> # export CONNECTBOX_PASSWORD="secret"
            >>> api = ConnectBoxAPI.from_env()
            >>> api.login()
        """
        config = load_env_config()
        return cls(config.address, config.username, config.password,
                   timeout=config.timeout)

    @classmethod
    def from_saved_credentials(cls, credentials_file: Optional[Path] = None,
                               timeout: float = DEFAULT_TIMEOUT) -> 'ConnectBoxAPI':
        """
        Create API instance using credentials saved by save_credentials()

        Args:
            credentials_file: Optional custom credentials file path
            timeout: Default request timeout in seconds

        Returns:
            ConnectBoxAPI instance, not yet logged in

        Raises:
            ValueError: If no saved credentials are found
        """
        credentials = CredentialStore(credentials_file).load()
        if credentials is None:
            raise ValueError("No saved credentials found. "
                             "Use ConnectBoxAPI.save_credentials() to store them.")

        return cls(credentials.address, credentials.username,
                   password_hash=credentials.password_hash, timeout=timeout)

    def save_credentials(self, credentials_file: Optional[Path] = None) -> bool:
        """
        Save address, username and password hash for from_saved_credentials()

        Returns:
            True if saved successfully
        """
        store = CredentialStore(credentials_file)
        return store.save(Credentials(self.address, self.username, self.password_hash))

    # ========================================================================
    # Session
    # ========================================================================

    @property
    def authenticated(self) -> bool:
        """True once login() has stored a session ID"""
        return bool(self.get_cookie(SESSION_ID_COOKIE))

    def login(self, timeout: Optional[float] = None) -> None:
        """
        Log in and store the session ID cookie

        The login page is fetched first so that the router hands out the
        initial token, then the credentials are posted to the setter.

        Args:
            timeout: Request timeout in seconds (default: client timeout)

        Raises:
            TransportError: If the router cannot be reached
            ResponseStatusError: If the router answers with a non-200 status
            LoginError: If the router rejects the login
        """
        # A failed login must not leave an earlier session ID behind
        remove_cookie_by_name(self.session.cookies, SESSION_ID_COOKIE)

        try:
            self._get_page(LOGIN_PAGE, timeout)
        except ConnectBoxError as e:
            e.add_context("get initial token")
            raise

        args = [
            ("Username", self.username),
            ("Password", self.password_hash),
        ]
        try:
            body = self._xml_request(XML_SETTER, FN_LOGIN, args, timeout).text
        except ConnectBoxError as e:
            e.add_context("xml request")
            raise

        if not body.startswith("success"):
            raise LoginError(f"invalid response: {body}")

        sid = parse_sid(body)
        if not sid:
            raise LoginError(f"missing SID: {body}")
        self.set_cookie(SESSION_ID_COOKIE, sid)

        logger.info("Logged in to %s as %s", self.address, self.username)

    def logout(self, timeout: Optional[float] = None) -> None:
        """
        Close the current session

        The router accepts a single session at a time, so a client that
        does not log out locks the web interface until the session times
        out. The session ID is dropped even if the request fails.
        """
        try:
            self._xml_request(XML_SETTER, FN_LOGOUT, [], timeout)
        finally:
            remove_cookie_by_name(self.session.cookies, SESSION_ID_COOKIE)
        logger.info("Logged out from %s", self.address)

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self.session.close()

    def get_cookie(self, name: str) -> str:
        """Return the value of a cookie in the session jar, or an empty string"""
        for cookie in self.session.cookies:
            if cookie.name == name:
                return cookie.value
        return ""

    def set_cookie(self, name: str, value: str) -> None:
        """Store a cookie for the router's host"""
        self.session.cookies.set(name, value, domain=self._cookie_domain, path="/")

    # ========================================================================
    # XML RPC
    # ========================================================================

    def get(self, fn: str, shape: Optional[Type[T]] = None,
            timeout: Optional[float] = None) -> Any:
        """
        Call a getter function and decode its XML response

        Args:
            fn: Getter function code, e.g. FN_CM_STATE
            shape: Record class to decode into (default: the record
                registered for fn in RESPONSE_TYPES)
            timeout: Request timeout in seconds (default: client timeout)

        Returns:
            Decoded record

        Raises:
            ValueError: If no shape is given and fn has no registered record
            TransportError: If the router cannot be reached
            ResponseStatusError: If the router answers with a non-200 status
            DecodeError: If the response is not the expected XML
        """
        if shape is None:
            try:
                shape = RESPONSE_TYPES[fn]
            except KeyError:
                raise ValueError(f"No response type registered for function {fn}") from None

        try:
            response = self._xml_request(XML_GETTER, fn, [], timeout)
        except ConnectBoxError as e:
            e.add_context("get response")
            raise

        try:
            return decode(response.content, shape)
        except DecodeError as e:
            e.add_context("unmarshal response")
            raise

    def set(self, fn: str, args: Optional[Sequence[Tuple[str, str]]] = None,
            timeout: Optional[float] = None) -> str:
        """
        Call a setter function

        Args:
            fn: Setter function code
            args: Ordered (key, value) arguments, sent after token and fun
            timeout: Request timeout in seconds (default: client timeout)

        Returns:
            Raw response body; its format depends on the function
        """
        return self._xml_request(XML_SETTER, fn, args or [], timeout).text

    def _xml_request(self, path: str, fn: str,
                     args: Sequence[Tuple[str, str]],
                     timeout: Optional[float]) -> requests.Response:
        """POST token, function code and arguments, in that order"""
        body = encode_args(build_args(self.token, fn, args))
        logger.debug("POST %s fun=%s", path, fn)
        return self._request(
            'POST', path, timeout,
            data=body,
            headers={'Content-Type': 'application/x-www-form-urlencoded'},
        )

    def _get_page(self, path: str, timeout: Optional[float]) -> str:
        """GET a page; only used for the cookie side effect of the login page"""
        logger.debug("GET %s", path)
        return self._request('GET', path, timeout).text

    def _request(self, method: str, path: str, timeout: Optional[float],
                 **kwargs) -> requests.Response:
        """Send a request, refresh the token and check the status"""
        url = f"{self.address}{path}"

        try:
            response = self.session.request(
                method, url,
                timeout=self.timeout if timeout is None else timeout,
                allow_redirects=False,
                **kwargs,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"send request: {e}") from e

        # Token must be updated after each response, whatever its status
        self._refresh_token()

        logger.debug("%s %s -> %d", method, path, response.status_code)
        if response.status_code != 200:
            raise ResponseStatusError(response.status_code, response.text)

        return response

    def _refresh_token(self) -> None:
        self.token = self.get_cookie(SESSION_TOKEN_COOKIE)

    # ========================================================================
    # Getter Methods
    # ========================================================================

    def get_global_settings(self, timeout: Optional[float] = None) -> GlobalSettings:
        """Global settings: firmware version, operator, access level"""
        return self.get(FN_GLOBAL_SETTINGS, GlobalSettings, timeout)

    def get_cm_system_info(self, timeout: Optional[float] = None) -> CMSystemInfo:
        """
        Cable modem system information

        Returns:
            CMSystemInfo with DOCSIS mode, hardware version, MAC address,
            serial number and system_uptime in seconds

        Example:
            >>> info = api.get_cm_system_info()
            >>> info.system_uptime
            405035
        """
        return self.get(FN_CM_SYSTEM_INFO, CMSystemInfo, timeout)

    def get_multilang(self, timeout: Optional[float] = None) -> Multilang:
        """Web interface language"""
        return self.get(FN_MULTILANG, Multilang, timeout)

    def get_status(self, timeout: Optional[float] = None) -> Status:
        """Modem status, SSIDs and number of LAN users"""
        return self.get(FN_STATUS, Status, timeout)

    def get_configuration(self, timeout: Optional[float] = None) -> Configuration:
        """Frequency plan and downstream frequency"""
        return self.get(FN_CONFIGURATION, Configuration, timeout)

    def get_downstream_table(self, timeout: Optional[float] = None) -> DownstreamTable:
        """Downstream channels with power, SNR and error counters"""
        return self.get(FN_DOWNSTREAM_TABLE, DownstreamTable, timeout)

    def get_upstream_table(self, timeout: Optional[float] = None) -> UpstreamTable:
        """Upstream channels with power and timeout counters"""
        return self.get(FN_UPSTREAM_TABLE, UpstreamTable, timeout)

    def get_signal_table(self, timeout: Optional[float] = None) -> SignalTable:
        """Codeword error counters per downstream channel"""
        return self.get(FN_SIGNAL_TABLE, SignalTable, timeout)

    def get_event_log(self, timeout: Optional[float] = None) -> EventLogTable:
        """Modem event log"""
        return self.get(FN_EVENT_LOG_TABLE, EventLogTable, timeout)

    def get_firewall_log(self, timeout: Optional[float] = None) -> FirewallLogTable:
        """Firewall log"""
        return self.get(FN_FIREWALL_LOG_TABLE, FirewallLogTable, timeout)

    def get_langsetlist(self, timeout: Optional[float] = None) -> Langsetlist:
        """Supported web interface languages"""
        return self.get(FN_LANGSETLIST, Langsetlist, timeout)

    def get_fail(self, timeout: Optional[float] = None) -> Fail:
        """Failed login counter"""
        return self.get(FN_FAIL, Fail, timeout)

    def get_login_timer(self, timeout: Optional[float] = None) -> LoginTimer:
        return self.get(FN_LOGIN_TIMER, LoginTimer, timeout)

    def get_lan_setting(self, timeout: Optional[float] = None) -> LANSetting:
        """LAN address, DMZ and DHCP range"""
        return self.get(FN_LAN_SETTING, LANSetting, timeout)

    def get_dhcpv6_info(self, timeout: Optional[float] = None) -> DHCPv6Info:
        """DHCPv6 and router advertisement settings"""
        return self.get(FN_DHCPV6_INFO, DHCPv6Info, timeout)

    def get_basic_dhcp(self, timeout: Optional[float] = None) -> BasicDHCP:
        """DHCPv4 settings and reserved addresses"""
        return self.get(FN_BASIC_DHCP, BasicDHCP, timeout)

    def get_wan_setting(self, timeout: Optional[float] = None) -> WANSetting:
        """WAN addresses, DNS servers and leases"""
        return self.get(FN_WAN_SETTING, WANSetting, timeout)

    def get_ip_filtering(self, timeout: Optional[float] = None) -> IPFiltering:
        return self.get(FN_IP_FILTERING, IPFiltering, timeout)

    def get_ipv6_filtering(self, timeout: Optional[float] = None) -> IPv6Filtering:
        return self.get(FN_IPV6_FILTERING, IPv6Filtering, timeout)

    def get_port_trigger(self, timeout: Optional[float] = None) -> PortTrigger:
        return self.get(FN_PORT_TRIGGER, PortTrigger, timeout)

    def get_web_filter(self, timeout: Optional[float] = None) -> WebFilter:
        """Firewall protection and flood detection settings"""
        return self.get(FN_WEB_FILTER, WebFilter, timeout)

    def get_ipv6_web_filter(self, timeout: Optional[float] = None) -> IPv6WebFilter:
        """IPv6 firewall protection and flood detection settings"""
        return self.get(FN_IPV6_WEB_FILTER, IPv6WebFilter, timeout)

    def get_mac_filtering(self, timeout: Optional[float] = None) -> MACFiltering:
        return self.get(FN_MAC_FILTERING, MACFiltering, timeout)

    def get_forwarding(self, timeout: Optional[float] = None) -> Forwarding:
        """Port forwarding and UPnP mappings"""
        return self.get(FN_FORWARDING, Forwarding, timeout)

    def get_lan_user_table(self, timeout: Optional[float] = None) -> LANUserTable:
        """Connected Ethernet and WiFi clients"""
        return self.get(FN_LAN_USER_TABLE, LANUserTable, timeout)

    def get_ddns(self, timeout: Optional[float] = None) -> DDNS:
        """Dynamic DNS configuration"""
        return self.get(FN_DDNS, DDNS, timeout)

    def get_remote_access(self, timeout: Optional[float] = None) -> RemoteAccess:
        return self.get(FN_REMOTE_ACCESS, RemoteAccess, timeout)

    def get_mtu_size(self, timeout: Optional[float] = None) -> MTUSize:
        return self.get(FN_MTU_SIZE, MTUSize, timeout)

    def get_cm_state(self, timeout: Optional[float] = None) -> CMState:
        """
        Cable modem state

        Returns:
            CMState with tunner_temperature and temperature in Celsius,
            operational state and WAN addresses
        """
        return self.get(FN_CM_STATE, CMState, timeout)

    def get_wired_state_1(self, timeout: Optional[float] = None) -> WiredState1:
        """Ethernet port speeds"""
        return self.get(FN_WIRED_STATE_1, WiredState1, timeout)

    def get_wired_state_2(self, timeout: Optional[float] = None) -> WiredState2:
        """Ethernet port speeds"""
        return self.get(FN_WIRED_STATE_2, WiredState2, timeout)

    def get_cm_status(self, timeout: Optional[float] = None) -> CMStatus:
        """Provisioning state, channels and service flows"""
        return self.get(FN_CM_STATUS, CMStatus, timeout)

    def get_eth_flaplist(self, timeout: Optional[float] = None) -> EthFlaplist:
        return self.get(FN_ETH_FLAPLIST, EthFlaplist, timeout)

    def get_wireless_basic_1(self, timeout: Optional[float] = None) -> WirelessBasic1:
        """WiFi settings for both bands"""
        return self.get(FN_WIRELESS_BASIC_1, WirelessBasic1, timeout)

    def get_wireless_wmm(self, timeout: Optional[float] = None) -> WirelessWmm:
        return self.get(FN_WIRELESS_WMM, WirelessWmm, timeout)

    def get_wireless_site_survey(self, timeout: Optional[float] = None) -> WirelessSiteSurvey:
        return self.get(FN_WIRELESS_SITE_SURVEY, WirelessSiteSurvey, timeout)

    def get_wireless_guest_network_1(self, timeout: Optional[float] = None) -> WirelessGuestNetwork1:
        """Guest network interfaces"""
        return self.get(FN_WIRELESS_GUEST_NETWORK_1, WirelessGuestNetwork1, timeout)

    def get_cm_wireless_wps_1(self, timeout: Optional[float] = None) -> CMWirelessWPS1:
        """WPS settings"""
        return self.get(FN_CM_WIRELESS_WPS_1, CMWirelessWPS1, timeout)

    def get_cm_wireless_access_control(self, timeout: Optional[float] = None) -> CMWirelessAccessControl:
        """WiFi MAC access control lists"""
        return self.get(FN_CM_WIRELESS_ACCESS_CONTROL, CMWirelessAccessControl, timeout)

    def get_channel_map(self, timeout: Optional[float] = None) -> ChannelMap:
        """Per-channel usage for both bands"""
        return self.get(FN_CHANNEL_MAP, ChannelMap, timeout)

    def get_wireless_basic_2(self, timeout: Optional[float] = None) -> WirelessBasic2:
        return self.get(FN_WIRELESS_BASIC_2, WirelessBasic2, timeout)

    def get_wireless_guest_network_2(self, timeout: Optional[float] = None) -> WirelessGuestNetwork2:
        """Guest network settings and schedule"""
        return self.get(FN_WIRELESS_GUEST_NETWORK_2, WirelessGuestNetwork2, timeout)

    def get_wireless_client(self, timeout: Optional[float] = None) -> WirelessClient:
        """Associated WiFi stations per band"""
        return self.get(FN_WIRELESS_CLIENT, WirelessClient, timeout)

    def get_cm_wireless_wps_2(self, timeout: Optional[float] = None) -> CMWirelessWPS2:
        """WPS status"""
        return self.get(FN_CM_WIRELESS_WPS_2, CMWirelessWPS2, timeout)

    def get_default_value(self, timeout: Optional[float] = None) -> DefaultValue:
        """Factory default password, SSID and WiFi key"""
        return self.get(FN_DEFAULT_VALUE, DefaultValue, timeout)

    def get_gst_random_password(self, timeout: Optional[float] = None) -> GstRandomPassword:
        return self.get(FN_GST_RANDOM_PASSWORD, GstRandomPassword, timeout)

    def get_wifi_state(self, timeout: Optional[float] = None) -> WIFIState:
        return self.get(FN_WIFI_STATE, WIFIState, timeout)

    def get_wireless_resetting(self, timeout: Optional[float] = None) -> WirelessResetting:
        return self.get(FN_WIRELESS_RESETTING, WirelessResetting, timeout)
