# fixture setup
from throwif.tests.fixtures import (
    # function-scope, attaches a custom `is_100` guard
    custom_guard,
    # function-scope, isolated configuration manager
    guard_cfg,
    # session-scope reduction of log messages
    reduce_logging,
)
