"""
mp_authz – In-process authorization rules.

Import path convention::

    from mp_authz import Ability
    from mp_authz.kernel.errors import AuthorizationError
    from mp_authz.config import AuthzSettings, EnvSettingsLoader

Example::

    ability = Ability()
    ability.allow(is_user, "manage", is_product)
    ability.deny(is_user).to("read").on(is_published)
    ability.authorize(user, "delete", product)
"""

from mp_authz.kernel.security import MANAGE, Ability, combine

__version__ = "0.1.0"
__all__ = ["Ability", "MANAGE", "__version__", "combine"]
