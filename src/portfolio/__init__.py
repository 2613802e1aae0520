"""
Page components and their collaborators.

Modules:
- resources: async HTTP JSON fetcher for the page data files
- loader: tri-state resource loader (projects, experiences)
- scheduler: repeating timer on the asyncio event loop
- reveal: scroll-reveal animator over a visibility observer
- contact: contact form validation and submit/reset state machine
- typing_effect: hero text typing animation
- dates: French long-form date display
- config: environment configuration
"""

__all__ = [
    "config",
    "contact",
    "dates",
    "loader",
    "resources",
    "reveal",
    "scheduler",
    "typing_effect",
]
