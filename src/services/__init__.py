"""
Couche services (cas d'utilisation).

Les services orchestrent la logique de regroupement. Ils dependent des ports
(interfaces) de core/, jamais des implementations concretes de adapters/.

- MultiVersionClassifier : fusion des versions alternatives d'un meme film
- VideoGroupingService : regroupement des candidats en unites video
- MovieAssemblerService : resolution d'un dossier en film(s)
"""

from src.services.movie_assembler import MovieAssemblerService
from src.services.multi_version import MultiVersionClassifier
from src.services.video_grouping import VideoGroupingService

__all__ = [
    "MovieAssemblerService",
    "MultiVersionClassifier",
    "VideoGroupingService",
]
