"""File-based model storage adapter.

Infrastructure adapter that implements IModelStorage using the file system.
"""

import json
import logging
import os
import pickle
import re
from datetime import datetime
from pathlib import Path
from typing import Any

from domain.exceptions import ModelNotFoundError, StorageError
from domain.interfaces import IModelStorage
from domain.value_objects import ModelInfo

_LOGGER = logging.getLogger(__name__)

_MODEL_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class FileModelStorage(IModelStorage):
    """File-based implementation of model storage.

    Each model is a pickle file next to a JSON metadata file; a JSON index
    maps model ids to their creation time.
    """

    MODEL_FILE_SUFFIX = ".pkl"
    METADATA_FILE_SUFFIX = ".json"
    INDEX_FILE_NAME = "models_index.json"

    def __init__(self, base_path: str | Path) -> None:
        """Initialize file-based storage.

        Args:
            base_path: Directory path for storing models
        """
        self._base_path = Path(base_path)
        self._base_path.mkdir(parents=True, exist_ok=True)

    @property
    def base_path(self) -> Path:
        """Return the storage directory."""
        return self._base_path

    @staticmethod
    def _check_model_id(model_id: str) -> None:
        # ids become file names; anything else could escape base_path
        if not isinstance(model_id, str) or not _MODEL_ID_PATTERN.fullmatch(model_id):
            raise ModelNotFoundError(f"Model not found: {model_id!r}")

    def _model_path(self, model_id: str) -> Path:
        self._check_model_id(model_id)
        return self._base_path / f"{model_id}{self.MODEL_FILE_SUFFIX}"

    def _metadata_path(self, model_id: str) -> Path:
        self._check_model_id(model_id)
        return self._base_path / f"{model_id}{self.METADATA_FILE_SUFFIX}"

    async def save_model(
        self,
        model_id: str,
        model: Any,
        info: ModelInfo,
    ) -> None:
        """Save a trained model to file storage.

        Args:
            model_id: Unique identifier for the model
            model: The trained model object
            info: Model metadata
        """
        try:
            with open(self._model_path(model_id), "wb") as f:
                pickle.dump(model, f)

            with open(self._metadata_path(model_id), "w") as f:
                json.dump(info.to_dict(), f, indent=2)

            await self._update_index(model_id, info.created_at)

            _LOGGER.info("Model saved: %s", model_id)

        except (OSError, pickle.PickleError, TypeError) as e:
            raise StorageError(f"Failed to save model {model_id}: {e}") from e

    async def load_model(self, model_id: str) -> tuple[Any, ModelInfo]:
        """Load a model from file storage.

        Args:
            model_id: Identifier of the model to load

        Returns:
            Tuple of (model object, model info)
        """
        model_path = self._model_path(model_id)
        if not model_path.exists():
            raise ModelNotFoundError(f"Model not found: {model_id}")

        try:
            with open(model_path, "rb") as f:
                model = pickle.load(f)

            with open(self._metadata_path(model_id)) as f:
                model_info = ModelInfo.from_dict(json.load(f))

            _LOGGER.debug("Model loaded: %s", model_id)
            return model, model_info

        except (OSError, pickle.UnpicklingError, json.JSONDecodeError, KeyError, ValueError) as e:
            raise StorageError(f"Failed to load model {model_id}: {e}") from e

    async def get_latest_model_id(self) -> str | None:
        """Get the ID of the most recently trained model.

        Returns:
            Model ID or None if no models exist
        """
        index = await self._load_index()
        if not index:
            return None

        sorted_models = sorted(index.items(), key=lambda x: x[1], reverse=True)
        return sorted_models[0][0]

    async def list_models(self) -> list[ModelInfo]:
        """List all available models.

        Returns:
            List of model information objects, newest first
        """
        models = []
        index = await self._load_index()

        for model_id in index:
            try:
                _, info = await self.load_model(model_id)
                models.append(info)
            except (ModelNotFoundError, StorageError) as e:
                _LOGGER.warning("Failed to load model %s: %s", model_id, e)

        return sorted(models, key=lambda x: x.created_at, reverse=True)

    async def delete_model(self, model_id: str) -> None:
        """Delete a model from file storage.

        Args:
            model_id: Identifier of the model to delete
        """
        model_path = self._model_path(model_id)
        metadata_path = self._metadata_path(model_id)

        if not model_path.exists():
            raise ModelNotFoundError(f"Model not found: {model_id}")

        try:
            os.remove(model_path)
            if metadata_path.exists():
                os.remove(metadata_path)

            await self._remove_from_index(model_id)

            _LOGGER.info("Model deleted: %s", model_id)

        except OSError as e:
            raise StorageError(f"Failed to delete model {model_id}: {e}") from e

    async def _load_index(self) -> dict[str, str]:
        """Load the models index.

        Returns:
            Dictionary mapping model_id to its ISO creation timestamp
        """
        index_path = self._base_path / self.INDEX_FILE_NAME

        if not index_path.exists():
            return {}

        try:
            with open(index_path) as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            _LOGGER.warning("Ignoring unreadable model index %s: %s", index_path, e)
            return {}

    async def _update_index(self, model_id: str, created_at: datetime) -> None:
        """Add a model to the index."""
        index = await self._load_index()
        index[model_id] = created_at.isoformat()
        await self._save_index(index)

    async def _remove_from_index(self, model_id: str) -> None:
        """Remove a model from the index."""
        index = await self._load_index()
        if model_id in index:
            del index[model_id]
            await self._save_index(index)

    async def _save_index(self, index: dict[str, str]) -> None:
        """Save the models index."""
        index_path = self._base_path / self.INDEX_FILE_NAME
        with open(index_path, "w") as f:
            json.dump(index, f, indent=2)
