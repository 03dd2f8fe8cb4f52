from .authorization import AccountFlagsLookup, AuthorizationPolicyChecker, approval_required_for
from .horizon import HorizonAccountFlagsClient

__all__ = [
    'AccountFlagsLookup',
    'AuthorizationPolicyChecker',
    'HorizonAccountFlagsClient',
    'approval_required_for',
]
