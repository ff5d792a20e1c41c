"""
Module: collection

Purpose:
    Ordered, caller-managed set of images waiting to be converted.
    Images can be added, removed and reordered before a conversion starts.

Key Classes:
    - ImageCollection: Mutable ordered list of SourceImage

Dependencies:
    - core.models.images: SourceImage, is_accepted_file

Used By:
    - gui.widgets.image_list: Drop zone and thumbnail list
    - scripts/convert_images.py: CLI input
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List

from .models.images import SourceImage, is_accepted_file, new_image_id

logger = logging.getLogger(__name__)


class ImageCollection:
    """
    Ordered collection of images for one conversion.

    Order is the page order of the output document.

    Example:
        >>> images = ImageCollection()
        >>> images.add_paths([Path("a.png"), Path("b.jpg")])
        >>> images.move(1, 0)
        >>> [img.name for img in images]
        ['b.jpg', 'a.png']
    """

    def __init__(self, images: Iterable[SourceImage] = ()) -> None:
        self._images: List[SourceImage] = []
        for image in images:
            self.add(image)

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[SourceImage]:
        return iter(self._images)

    def __getitem__(self, index: int) -> SourceImage:
        return self._images[index]

    def __bool__(self) -> bool:
        return bool(self._images)

    def ids(self) -> List[str]:
        return [image.id for image in self._images]

    def index_of(self, image_id: str) -> int:
        """
        Position of an image in the collection.

        Raises:
            KeyError: If no image has this id
        """
        for index, image in enumerate(self._images):
            if image.id == image_id:
                return index
        raise KeyError(image_id)

    def add(self, image: SourceImage) -> SourceImage:
        """
        Append an image. An image whose id is already present is re-issued
        with a fresh id so ids stay unique.
        """
        if image.id in self.ids():
            image = SourceImage(
                data=image.data,
                name=image.name,
                mime_type=image.mime_type,
                id=self._unused_id(),
            )
        self._images.append(image)
        return image

    def add_paths(self, paths: Iterable[Path]) -> List[SourceImage]:
        """
        Read and append image files, skipping unsupported extensions.

        Every accepted file is read before any is appended, so a read
        failure leaves the collection unchanged.

        Returns:
            The images that were added, in order

        Raises:
            OSError: If an accepted file cannot be read
        """
        loaded: List[SourceImage] = []
        for path in paths:
            path = Path(path)
            if not is_accepted_file(path.name):
                logger.warning(f"Skipping {path.name}: unsupported file type")
                continue
            loaded.append(SourceImage.from_path(path))

        added = [self.add(image) for image in loaded]
        if added:
            logger.info(f"Added {len(added)} image(s), {len(self)} in total")
        return added

    def remove(self, image_id: str) -> SourceImage:
        """
        Remove an image by id.

        Raises:
            KeyError: If no image has this id
        """
        return self._images.pop(self.index_of(image_id))

    def move(self, from_index: int, to_index: int) -> None:
        """
        Move the image at ``from_index`` so it ends up at ``to_index``.

        Raises:
            IndexError: If either index is out of range
        """
        count = len(self._images)
        if not 0 <= from_index < count:
            raise IndexError(f"from_index out of range: {from_index}")
        if not 0 <= to_index < count:
            raise IndexError(f"to_index out of range: {to_index}")
        image = self._images.pop(from_index)
        self._images.insert(to_index, image)

    def reorder(self, image_ids: List[str]) -> None:
        """
        Replace the order with the given id sequence.

        Raises:
            ValueError: If ``image_ids`` is not a permutation of the current ids
        """
        if sorted(image_ids) != sorted(self.ids()):
            raise ValueError("image_ids must contain exactly the current image ids")
        by_id = {image.id: image for image in self._images}
        self._images = [by_id[image_id] for image_id in image_ids]

    def clear(self) -> None:
        self._images.clear()

    def _unused_id(self) -> str:
        existing = set(self.ids())
        while True:
            candidate = new_image_id()
            if candidate not in existing:
                return candidate
