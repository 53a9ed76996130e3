#!/usr/bin/env python3
"""
Default configuration values for the cmsearch parser
"""

DEFAULT_MINSCORE = 0.0
DEFAULT_PRIMARY_TAG = 'misc_binding'
DEFAULT_SOURCE_LABEL = 'Infernal'
DEFAULT_DESCRIPTOR_LABEL = 'infernal'
DEFAULT_PROGRAM_VERSION = '0.71'
DEFAULT_ANALYSIS_METHOD = 'Infernal'

DEFAULT_CONFIG = {
    'parser': {
        'minscore': DEFAULT_MINSCORE,
        'primary_tag': DEFAULT_PRIMARY_TAG,
        'source_label': DEFAULT_SOURCE_LABEL,
        'descriptor_label': DEFAULT_DESCRIPTOR_LABEL,
        'model_identifier': '',
        'accession': '',
        'program_version': DEFAULT_PROGRAM_VERSION,
        'analysis_method': DEFAULT_ANALYSIS_METHOD,
    },
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
}
