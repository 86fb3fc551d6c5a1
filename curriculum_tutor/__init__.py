"""
Curriculum Tutor

Curriculum-governed retrieval and generation core: turns a student's question
into a policy-constrained answer grounded in approved course material.
"""

__version__ = "1.0.0"
