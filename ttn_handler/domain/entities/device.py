"""Domain entities for devices registered on a handler application."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(slots=True)
class Device:
    """A LoRaWAN device as known by the handler."""

    app_id: str
    dev_id: str
    app_eui: str
    dev_eui: str
    dev_addr: str
    description: Optional[str] = None

    nwk_s_key: Optional[str] = None
    app_s_key: Optional[str] = None
    app_key: Optional[str] = None
    f_cnt_up: Optional[int] = None
    f_cnt_down: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[int] = None
    attributes: Dict[str, str] = field(default_factory=dict)
    disable_f_cnt_check: Optional[bool] = None
    uses32_bit_f_cnt: Optional[bool] = None
    activation_constraints: Optional[str] = None
    last_seen: Optional[int] = None
