"""
Models for SmartZone zones and AP groups.

A zone groups access points that share radio and network configuration. Only the
settings seen across controller releases are modelled; everything else lands in
``_extra_fields``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import JsonValue, SmartZoneModel, SmartZoneObject


@dataclass
class ZoneTimezone(SmartZoneModel):
    system_timezone: Optional[str] = None
    customized_timezone: Optional[JsonValue] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneApLogin(SmartZoneModel):
    ap_login_name: Optional[str] = None
    ap_login_password: Optional[str] = field(default=None, repr=False)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneWifi24(SmartZoneModel):
    auto_cell_sizing: Optional[JsonValue] = None
    tx_power: Optional[str] = None
    channel_width: Optional[int] = None
    channel: Optional[int] = None
    channel_range: List[int] = field(default_factory=list)
    available_channel_range: List[int] = field(default_factory=list)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneWifi50(SmartZoneModel):
    auto_cell_sizing: Optional[JsonValue] = None
    tx_power: Optional[str] = None
    channel_width: Optional[int] = None
    indoor_channel: Optional[int] = None
    outdoor_channel: Optional[int] = None
    indoor_secondary_channel: Optional[JsonValue] = None
    outdoor_secondary_channel: Optional[JsonValue] = None
    indoor_channel_range: List[int] = field(default_factory=list)
    outdoor_channel_range: List[int] = field(default_factory=list)
    available_indoor_channel_range: List[int] = field(default_factory=list)
    available_outdoor_channel_range: List[int] = field(default_factory=list)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneBackgroundScanning(SmartZoneModel):
    frequency_in_sec: Optional[int] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneBandBalancing(SmartZoneModel):
    mode: Optional[str] = None
    wifi24_percentage: Optional[int] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneRogue(SmartZoneModel):
    report_type: Optional[str] = None
    malicious_types: Optional[JsonValue] = None
    protection_enabled: Optional[bool] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneApRebootTimeout(SmartZoneModel):
    gateway_loss_timeout_in_sec: Optional[int] = None
    server_loss_timeout_in_sec: Optional[int] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneAutoChannelSelection(SmartZoneModel):
    channel_select_mode: Optional[str] = None
    channel_fly_mtbc: Optional[JsonValue] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneApMgmtVlan(SmartZoneModel):
    id: Optional[int] = None
    mode: Optional[str] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneAltitude(SmartZoneModel):
    altitude_unit: Optional[str] = None
    altitude_value: Optional[JsonValue] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneSnmpAgent(SmartZoneModel):
    ap_snmp_enabled: Optional[bool] = None
    snmp_v2_agent: List[JsonValue] = field(default_factory=list)
    snmp_v3_agent: List[JsonValue] = field(default_factory=list)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ZoneLteBandLockChannel(SmartZoneModel):
    sim_card_id: Optional[int] = None
    type: Optional[str] = None
    channel_4g: Optional[str] = None
    channel_3g: Optional[str] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class SmartZoneZone(SmartZoneModel):
    """
    Zone configuration as returned by ``GET /rkszones/{id}``.
    """
    # Identification
    id: Optional[str] = None
    domain_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    country_code: Optional[str] = None
    version: Optional[str] = None
    timezone: Optional[ZoneTimezone] = None
    login: Optional[ZoneApLogin] = None

    # Location
    location: Optional[str] = None
    location_additional_info: Optional[str] = None
    latitude: Optional[JsonValue] = None
    longitude: Optional[JsonValue] = None
    altitude: Optional[ZoneAltitude] = None
    aws_venue: Optional[str] = None

    # Radio
    ip_mode: Optional[str] = None
    ipv6_traffic_filter_enabled: Optional[JsonValue] = None
    mesh: Optional[JsonValue] = None
    dfs_channel_enabled: Optional[bool] = None
    cband_channel_enabled: Optional[bool] = None
    cband_channel_license_enabled: Optional[bool] = None
    channel144_enabled: Optional[bool] = None
    wifi24: Optional[ZoneWifi24] = None
    wifi50: Optional[ZoneWifi50] = None
    protection_mode24: Optional[str] = None
    channel_mode_enabled: Optional[bool] = None
    background_scanning24: Optional[ZoneBackgroundScanning] = None
    background_scanning50: Optional[ZoneBackgroundScanning] = None
    auto_channel_selection24: Optional[ZoneAutoChannelSelection] = None
    auto_channel_selection50: Optional[ZoneAutoChannelSelection] = None
    channel_evaluation_interval: Optional[int] = None
    client_admission_control24: Optional[JsonValue] = None
    client_admission_control50: Optional[JsonValue] = None
    client_load_balancing24: Optional[JsonValue] = None
    client_load_balancing50: Optional[JsonValue] = None
    band_balancing: Optional[ZoneBandBalancing] = None
    load_balancing_method: Optional[str] = None
    smart_monitor: Optional[JsonValue] = None
    syslog: Optional[JsonValue] = None

    # Tunnelling
    tunnel_type: Optional[str] = None
    tunnel_profile: Optional[SmartZoneObject] = None
    ruckus_gre_tunnel_profile: Optional[SmartZoneObject] = None
    soft_gre_tunnel_proflies: Optional[JsonValue] = None
    ipsec_profiles: Optional[JsonValue] = None
    ipsec_tunnel_mode: Optional[JsonValue] = None
    ipsec_profile: Optional[JsonValue] = None

    # Rogue detection
    rogue: Optional[ZoneRogue] = None
    rogue_ap_report_threshold: Optional[int] = None
    rogue_ap_aggressiveness_mode: Optional[int] = None
    rogue_ap_jamming_detection: Optional[bool] = None
    rogue_ap_jamming_threshold: Optional[JsonValue] = None

    # AP management
    ap_reboot_timeout: Optional[ZoneApRebootTimeout] = None
    ap_mgmt_vlan: Optional[ZoneApMgmtVlan] = None
    ap_latency_interval: Optional[JsonValue] = None
    recovery_ssid: Optional[JsonValue] = None
    snmp_agent: Optional[ZoneSnmpAgent] = None
    ap_hccd_enabled: Optional[bool] = None
    ap_hccd_persist: Optional[bool] = None
    ssh_tunnel_encryption: Optional[str] = None
    lte_band_lock_channels: List[ZoneLteBandLockChannel] = field(default_factory=list)

    # Affinity and redundancy
    vlan_overlapping_enabled: Optional[bool] = None
    node_affinity_profile: Optional[JsonValue] = None
    zone_affinity_profile_id: Optional[str] = None
    enforce_priority_zone_affinity_enable: Optional[bool] = None
    cluster_redundancy_enabled: Optional[bool] = None
    aaa_affinity_enabled: Optional[bool] = None

    # Services
    location_based_service: Optional[JsonValue] = None
    venue_profile: Optional[JsonValue] = None
    bonjour_fencing_policy_enabled: Optional[bool] = None
    bonjour_fencing_policy: Optional[JsonValue] = None
    dhcp_site_config: Optional[JsonValue] = None
    directed_multicast_from_wired_client_enabled: Optional[bool] = None
    directed_multicast_from_wireless_client_enabled: Optional[bool] = None
    directed_multicast_from_network_enabled: Optional[bool] = None
    health_check_sites_enabled: Optional[bool] = None
    health_check_sites: List[str] = field(default_factory=list)

    # DoS barring
    dos_barring_enable: Optional[int] = None
    dos_barring_period: Optional[int] = None
    dos_barring_threshold: Optional[int] = None
    dos_barring_check_period: Optional[int] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    _nested = {
        "timezone": ZoneTimezone,
        "login": ZoneApLogin,
        "altitude": ZoneAltitude,
        "wifi24": ZoneWifi24,
        "wifi50": ZoneWifi50,
        "background_scanning24": ZoneBackgroundScanning,
        "background_scanning50": ZoneBackgroundScanning,
        "auto_channel_selection24": ZoneAutoChannelSelection,
        "auto_channel_selection50": ZoneAutoChannelSelection,
        "band_balancing": ZoneBandBalancing,
        "tunnel_profile": SmartZoneObject,
        "ruckus_gre_tunnel_profile": SmartZoneObject,
        "rogue": ZoneRogue,
        "ap_reboot_timeout": ZoneApRebootTimeout,
        "ap_mgmt_vlan": ZoneApMgmtVlan,
        "snmp_agent": ZoneSnmpAgent,
    }
    _nested_lists = {
        "lte_band_lock_channels": ZoneLteBandLockChannel,
    }


@dataclass
class SmartZoneApGroup(SmartZoneModel):
    """An AP group as returned by ``GET /rkszones/{zoneId}/apgroups/{groupId}``."""
    id: Optional[str] = None
    zone_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    members: List[JsonValue] = field(default_factory=list)

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)
