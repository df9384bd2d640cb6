suite = 'Scriptc'

__version__ = '0.3.0'
__release_date__ = '2026-10-17'
__copyright__ = 'Copyright (c) 2024-2026 Scriptc developers'
