from .test_capinfo import TestDuplicates, TestLattice, TestLoading, TestSchema
from .test_catalog import TestCatalog
from .test_color import TestColor, TestPalette
from .test_environment import TestEnvironment
from .test_verify import TestVerify

__all__ = (
    'TestCatalog',
    'TestColor',
    'TestDuplicates',
    'TestEnvironment',
    'TestLattice',
    'TestLoading',
    'TestPalette',
    'TestSchema',
    'TestVerify',
)
