"""Social graph exports"""

from .graph import ChannelSocialGraph, OpenSocialGraph, SocialGraph

__all__ = ["ChannelSocialGraph", "OpenSocialGraph", "SocialGraph"]
