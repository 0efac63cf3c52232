"""Processing Modules

This package contains the feature modules built on the ``gis_core``
infrastructure package.
"""
