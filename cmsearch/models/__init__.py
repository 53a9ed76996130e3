#!/usr/bin/env python3
"""
Data models for cmsearch alignments
"""
from .alignment import PendingHit, AlignmentBlock, AlignmentRecord

__all__ = ['PendingHit', 'AlignmentBlock', 'AlignmentRecord']
