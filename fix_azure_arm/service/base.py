from typing import Any, Generic, Optional, Type, TypeVar

from fix_azure_arm.azure_client import ArmClient, OperationGroup, Pager
from fix_azure_arm.resource.base import ListResult

T = TypeVar("T")

CreatedStatus = [200, 201]
UpdatedStatus = [200, 202]
DeletedStatus = [200, 202, 204]
ActionStatus = [200, 202, 204]


class ChildOperations(OperationGroup, Generic[T]):
    """
    Read operations on a collection of child resources.

    The collection path is a template that ends with the collection segment,
    e.g. `.../privateClouds/{private_cloud_name}/addons`.
    A single item is addressed with `{collection}/{name}`.
    """

    def __init__(
        self,
        client: ArmClient,
        collection: str,
        item_type: Type[T],
        list_type: Type[ListResult],
        service: Optional[str] = None,
        version: Optional[str] = None,
    ) -> None:
        super().__init__(client)
        self.collection = collection
        self.item_type = item_type
        self.list_type = list_type
        if service is not None:
            self.service = service
        if version is not None:
            self.version = version

    @property
    def item_path(self) -> str:
        return self.collection + "/{name}"

    def list(self, **kwargs: Any) -> Pager[T]:
        return self.client.pages(self.spec(self.collection, self.list_type), **kwargs)

    def get(self, name: str, **kwargs: Any) -> T:
        return self.client.execute(self.spec(self.item_path, self.item_type), name=name, **kwargs)  # type: ignore


class MutableChildOperations(ChildOperations[T]):
    """
    Child resources that can be created, replaced and deleted.
    """

    def create_or_update(self, name: str, body: T, **kwargs: Any) -> T:
        spec = self.spec(self.item_path, self.item_type, method="PUT", expected_status=CreatedStatus)
        return self.client.execute(spec, body, name=name, **kwargs)  # type: ignore

    def delete(self, name: str, **kwargs: Any) -> None:
        spec = self.spec(self.item_path, method="DELETE", expected_status=DeletedStatus)
        self.client.execute(spec, name=name, **kwargs)


class UpdatableChildOperations(MutableChildOperations[T]):
    """
    Child resources that can also be patched.
    """

    def update(self, name: str, body: Any, **kwargs: Any) -> T:
        spec = self.spec(self.item_path, self.item_type, method="PATCH", expected_status=UpdatedStatus)
        return self.client.execute(spec, body, name=name, **kwargs)  # type: ignore
