from abc import ABC, abstractmethod


class IMessageFormatter(ABC):
    """
    An interface (Port) for turning message templates into player-facing text.
    Templates use %s placeholders and <tag> markup such as <b> (bad) or <g> (good).
    """

    @abstractmethod
    def format(self, template: str, *args: object) -> str:
        """
        Interpolates the arguments into the template and resolves its markup.
        """
        pass
