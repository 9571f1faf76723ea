"""PyLandmarkConverter I/O subpackage.

This package contains modules for reading and writing landmark documents:
- metaimage: Image geometry from MetaImage and NRRD headers
- point_pairs: Image eXplorer point-pair exports
- registration_list: Registration tool landmark lists
- transformix_writer: Transformix landmark parameter files
- slicer_writer: 3D Slicer fiducial files
- text_writer: Plain-text landmark lists
- output_paths: Output naming and number formatting
- file_operations: Writing a landmark set in a chosen output format
"""

from .metaimage import locate_geometry_header, read_geometry
from .output_paths import format_number, output_stem
from .point_pairs import parse_point_pairs, read_point_pairs
from .registration_list import read_registration_list
from .slicer_writer import format_fiducials, write_slicer_fiducials
from .text_writer import format_plain_text, write_plain_text
from .transformix_writer import format_transformix, write_transformix

__all__ = [
    # metaimage
    "locate_geometry_header",
    "read_geometry",
    # output_paths
    "format_number",
    "output_stem",
    # point_pairs
    "parse_point_pairs",
    "read_point_pairs",
    # registration_list
    "read_registration_list",
    # slicer_writer
    "format_fiducials",
    "write_slicer_fiducials",
    # text_writer
    "format_plain_text",
    "write_plain_text",
    # transformix_writer
    "format_transformix",
    "write_transformix",
]
