from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel

from ..client import codec
from ..client.client_base import Params, RestAPI
from ..client.exceptions import ReadOnlyResourceError
from . import registry
from .registry import ResourceKind
from .schema import BatchObject, WCModel


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=WCModel)

ItemId = Union[int, str]
Batch = Union[BatchObject, Mapping[str, Any]]
NullItem = Union[BaseModel, Mapping[str, Any], Iterable[str]]


def null_fields_body(kind: ResourceKind, item: NullItem) -> str:
    """
    Build {"<field>": "", ...} for every field named by `item`.

    The store ignores fields left out of an update, so clearing a value
    (e.g. a sale price) means sending it explicitly as an empty string.
    For a model, only the fields set on the instance are named. Names are
    resolved against the kind's registered fields, so attribute names
    such as `tax_class` go out under their store name (`class`).

    Raises:
        TypeError: `item` is not a model, a mapping or a list of names
        ValueError: A name is not a field of `kind`
    """
    if isinstance(item, BaseModel):
        names = [name for name in type(item).model_fields if name in item.model_fields_set]
    elif isinstance(item, Mapping):
        names = [str(key) for key in item.keys()]
    elif isinstance(item, (list, tuple, set, frozenset)):
        names = [str(name) for name in item]
    else:
        raise TypeError(
            "update_with_null expects a model, a mapping or a list of field names, "
            f"got {type(item).__name__}"
        )
    return codec.serialize({kind.store_field_name(name): "" for name in names})


def with_force(params: Params, force: bool) -> Dict[str, Any]:
    """Copy of params with force=true added when forcing and not already set."""
    query: Dict[str, Any] = dict(params or {})
    if force:
        query.setdefault("force", "true")
    return query


class _ResourceBase(Generic[ModelT]):
    def __init__(self, api: RestAPI, kind: Union[str, ResourceKind]) -> None:
        self.api = api
        self.kind = registry.get_kind(kind) if isinstance(kind, str) else kind

    @property
    def model(self) -> type:
        return self.kind.model

    def _ensure_writable(self) -> None:
        if self.kind.read_only:
            raise ReadOnlyResourceError(f"{self.kind.name} is read-only")

    def _get_one(self, path: str, params: Params) -> ModelT:
        return self.api.deserialize_json(self.api.get_restful(path, params), self.model)

    def _get_list(self, path: str, params: Params) -> List[ModelT]:
        return self.api.deserialize_json(self.api.get_restful(path, params), List[self.model])

    def _post(self, path: str, body: Any, params: Params) -> ModelT:
        self._ensure_writable()
        return self.api.deserialize_json(self.api.post_restful(path, body, params), self.model)

    def _put(self, path: str, body: Any, params: Params) -> ModelT:
        self._ensure_writable()
        return self.api.deserialize_json(self.api.put_restful(path, body, params), self.model)

    def _put_nulls(self, path: str, item: Any, params: Params) -> ModelT:
        if not self.api.supports_null_update:
            # Transport cannot carry a hand-built body; send the item as a normal update
            logger.warning(
                "%s does not support null updates; falling back to a normal update of %s",
                type(self.api).__name__,
                path,
            )
            return self._put(path, item, params)
        return self._put(path, null_fields_body(self.kind, item), params)

    def _batch(self, path: str, batch: Batch, params: Params) -> BatchObject:
        self._ensure_writable()
        text = self.api.post_restful(path, batch, params)
        return self.api.deserialize_json(text, BatchObject[self.model])

    def _delete(self, path: str, force: bool, params: Params) -> str:
        self._ensure_writable()
        return self.api.delete_restful(path, with_force(params, force))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name!r})"


class Resource(_ResourceBase[ModelT]):
    """
    CRUD and batch calls for a top-level resource kind (products, coupons...).

    Example:
        products = Resource(api, "products")
        product = products.get(42)
        products.update(42, Product(regular_price="19.99"))
    """

    def __init__(self, api: RestAPI, kind: Union[str, ResourceKind]) -> None:
        super().__init__(api, kind)
        if self.kind.is_nested:
            raise ValueError(f"{self.kind.name} is nested; use NestedResource")

    @property
    def endpoint(self) -> str:
        return registry.collection_path(self.kind)

    def get(self, item_id: ItemId, params: Params = None) -> ModelT:
        return self._get_one(registry.item_path(self.kind, item_id), params)

    def get_all(self, params: Params = None) -> List[ModelT]:
        return self._get_list(self.endpoint, params)

    def add(self, item: Any, params: Params = None) -> ModelT:
        return self._post(self.endpoint, item, params)

    def add_range(self, batch: Batch, params: Params = None) -> BatchObject:
        return self._batch(registry.batch_path(self.kind), batch, params)

    def update(self, item_id: ItemId, item: Any, params: Params = None) -> ModelT:
        return self._put(registry.item_path(self.kind, item_id), item, params)

    def update_with_null(
        self, item_id: ItemId, item: NullItem, params: Params = None
    ) -> ModelT:
        """Clear every field named by `item` (sent as empty strings)."""
        return self._put_nulls(registry.item_path(self.kind, item_id), item, params)

    def update_range(self, batch: Batch, params: Params = None) -> BatchObject:
        return self._batch(registry.batch_path(self.kind), batch, params)

    def delete(self, item_id: ItemId, force: bool = False, params: Params = None) -> str:
        """
        Delete one item. Without force most kinds are only moved to the trash.

        Returns:
            Raw response body (the deleted record as JSON)
        """
        return self._delete(registry.item_path(self.kind, item_id), force, params)

    def delete_range(self, batch: Batch, params: Params = None) -> str:
        self._ensure_writable()
        return self.api.post_restful(registry.batch_path(self.kind), batch, params)


class NestedResource(_ResourceBase[ModelT]):
    """
    CRUD and batch calls for a kind that lives under a parent item,
    e.g. order notes at orders/<order_id>/notes.
    """

    def __init__(self, api: RestAPI, kind: Union[str, ResourceKind]) -> None:
        super().__init__(api, kind)
        if not self.kind.is_nested:
            raise ValueError(f"{self.kind.name} is not nested; use Resource")

    def endpoint(self, parent_id: ItemId) -> str:
        return registry.collection_path(self.kind, parent_id)

    def get(self, item_id: ItemId, parent_id: ItemId, params: Params = None) -> ModelT:
        return self._get_one(registry.item_path(self.kind, item_id, parent_id), params)

    def get_all(self, parent_id: ItemId, params: Params = None) -> List[ModelT]:
        return self._get_list(self.endpoint(parent_id), params)

    def add(self, item: Any, parent_id: ItemId, params: Params = None) -> ModelT:
        return self._post(self.endpoint(parent_id), item, params)

    def add_range(self, parent_id: ItemId, batch: Batch, params: Params = None) -> BatchObject:
        return self._batch(registry.batch_path(self.kind, parent_id), batch, params)

    def update(
        self, item_id: ItemId, item: Any, parent_id: ItemId, params: Params = None
    ) -> ModelT:
        return self._put(registry.item_path(self.kind, item_id, parent_id), item, params)

    def update_with_null(
        self,
        item_id: ItemId,
        item: NullItem,
        parent_id: ItemId,
        params: Params = None,
    ) -> ModelT:
        return self._put_nulls(registry.item_path(self.kind, item_id, parent_id), item, params)

    def update_range(self, parent_id: ItemId, batch: Batch, params: Params = None) -> BatchObject:
        return self._batch(registry.batch_path(self.kind, parent_id), batch, params)

    def delete(
        self,
        item_id: ItemId,
        parent_id: ItemId,
        force: bool = False,
        params: Params = None,
    ) -> str:
        return self._delete(registry.item_path(self.kind, item_id, parent_id), force, params)

    def delete_range(self, parent_id: ItemId, batch: Batch, params: Params = None) -> str:
        self._ensure_writable()
        return self.api.post_restful(registry.batch_path(self.kind, parent_id), batch, params)
