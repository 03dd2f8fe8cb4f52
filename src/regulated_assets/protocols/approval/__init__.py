"""
Approval Protocol - Regulated Asset Transfers
=============================================

Client side of the regulated assets approval protocol (SEP-0008):

1. ApprovalClient posts a transaction and returns one of
   Approved / Revised / Pending / ActionRequired / Rejected
2. On ActionRequired, ActionClient posts the requested fields and returns
   Done / NextUrl

Each call is a single request. Polling a Pending outcome, following a
NextUrl and resubmitting after Done are left to the caller.
"""

from .action_client import ActionClient
from .approval_client import ApprovalClient
from .responses import (
    DEFAULT_ACTION_METHOD,
    ActionOutcome,
    ActionRequired,
    ApprovalOutcome,
    Approved,
    Done,
    NextUrl,
    Pending,
    Rejected,
    Revised,
    parse_action_response,
    parse_approval_response,
)

__all__ = [
    'ActionClient',
    'ActionOutcome',
    'ActionRequired',
    'ApprovalClient',
    'ApprovalOutcome',
    'Approved',
    'DEFAULT_ACTION_METHOD',
    'Done',
    'NextUrl',
    'Pending',
    'Rejected',
    'Revised',
    'parse_action_response',
    'parse_approval_response',
]
