"""
SkillHand Admin Console.

Admin back office for the SkillHand home-services marketplace.
"""

__version__ = "0.1.0"
__author__ = "SkillHand Team"
__description__ = "SkillHand Admin Console"
