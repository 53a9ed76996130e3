#!/usr/bin/env python3
"""
Configuration schema definition for validation
"""
from typing import Dict, Any, List

LABEL_TYPES = (str, int, float)


class ConfigSchema:
    """Configuration schema for validation"""

    SCHEMA = {
        'parser': {
            'minscore': {'type': (int, float), 'required': True},
            # labels are stringified by ParserConfig; YAML and env overrides
            # read unquoted 0.71 or 168 as numbers
            'primary_tag': {'type': LABEL_TYPES, 'required': False},
            'source_label': {'type': LABEL_TYPES, 'required': False},
            'descriptor_label': {'type': LABEL_TYPES, 'required': False},
            'model_identifier': {'type': LABEL_TYPES, 'required': False},
            'accession': {'type': LABEL_TYPES, 'required': False},
            'program_version': {'type': LABEL_TYPES, 'required': False},
            'analysis_method': {'type': str, 'required': False},
        },
        'logging': {
            'level': {'type': str, 'required': False},
            'format': {'type': str, 'required': False},
            'log_dir': {'type': str, 'required': False},
        },
    }

    @staticmethod
    def _type_name(expected) -> str:
        if isinstance(expected, tuple):
            return " or ".join(t.__name__ for t in expected)
        return expected.__name__

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> List[str]:
        """Validate configuration against schema

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for section, fields in cls.SCHEMA.items():
            if section not in config:
                if any(props.get('required', False) for props in fields.values()):
                    errors.append(f"Missing required configuration section: {section}")
                continue

            section_config = config[section]
            if not isinstance(section_config, dict):
                errors.append(f"Configuration section {section} must be a mapping")
                continue

            for field, props in fields.items():
                if field not in section_config:
                    if props.get('required', False):
                        errors.append(f"Missing required configuration field: {section}.{field}")
                    continue

                value = section_config[field]
                expected_type = props['type']
                # bool is an int subclass but never a valid score or label
                if isinstance(value, bool) or not isinstance(value, expected_type):
                    errors.append(
                        f"Invalid type for {section}.{field}: expected {cls._type_name(expected_type)}, "
                        f"got {type(value).__name__}"
                    )

        return errors
