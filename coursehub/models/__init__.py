"""
API and projection schemas.

- platform_document: PlatformDocument, CourseEmbed, UserEmbed
- platform / course / user: request and response contracts
"""

from coursehub.models.platform_document import CourseEmbed, PlatformDocument, UserEmbed

__all__ = ["PlatformDocument", "CourseEmbed", "UserEmbed"]
