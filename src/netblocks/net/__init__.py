"""Netblock models, construction and ordering."""

from netblocks.net.base import AddressSequence, Net, StepResult
from netblocks.net.build import new_net, new_net_between, parse_cidr
from netblocks.net.net4 import Net4
from netblocks.net.net6 import Net6
from netblocks.net.order import (
    compare_nets,
    ip_sort_key,
    net_sort_key,
    sort_ips,
    sort_nets,
)

__all__ = [
    "AddressSequence",
    "Net",
    "Net4",
    "Net6",
    "StepResult",
    "compare_nets",
    "ip_sort_key",
    "net_sort_key",
    "new_net",
    "new_net_between",
    "parse_cidr",
    "sort_ips",
    "sort_nets",
]
