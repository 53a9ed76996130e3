"""
Command-line interface for the cmsearch parser.
"""
