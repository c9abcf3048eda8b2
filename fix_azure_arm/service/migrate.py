from typing import Any, Generic, Optional, Type, TypeVar

from fix_azure_arm.azure_client import ArmClient, OperationGroup, Pager
from fix_azure_arm.config import ArmClientConfig, AzureCredentials
from fix_azure_arm.resource.base import ListResult
from fix_azure_arm.resource.migrate import (
    AssessedMachine,
    AssessedMachineResultList,
    Assessment,
    AssessmentOptions,
    AssessmentOptionsResultList,
    AssessmentResultList,
    DownloadUrl,
    Group,
    GroupResultList,
    HyperVCollector,
    HyperVCollectorList,
    ImportCollector,
    ImportCollectorList,
    Machine,
    MachineResultList,
    Operation,
    OperationResultList,
    PrivateEndpointConnection,
    PrivateEndpointConnectionCollection,
    PrivateLinkResource,
    PrivateLinkResourceCollection,
    Project,
    ProjectResultList,
    ServerCollector,
    ServerCollectorList,
    UpdateGroupBody,
    VMwareCollector,
    VMwareCollectorList,
)
from fix_azure_arm.service.base import CreatedStatus, UpdatedStatus

MigrateService = "migrate"
MigrateApiVersion = "2019-10-01"

# the service uses both spellings of resourceGroups and assessmentProjects
ProjectsPath = "/subscriptions/{subscription_id}/resourcegroups/{resource_group_name}/providers/Microsoft.Migrate/assessmentProjects"  # noqa: E501
ProjectPath = ProjectsPath + "/{project_name}"
ProjectChildPath = "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}/providers/Microsoft.Migrate/assessmentProjects/{project_name}"  # noqa: E501
ProjectLinkPath = "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}/providers/Microsoft.Migrate/assessmentprojects/{project_name}"  # noqa: E501
GroupPath = ProjectChildPath + "/groups/{group_name}"
AssessmentPath = GroupPath + "/assessments/{assessment_name}"

DeletedStatus = [200, 204]

C = TypeVar("C")


class MigrateOperationGroup(OperationGroup):
    service = MigrateService
    version = MigrateApiVersion


class Operations(MigrateOperationGroup):
    def list(self, **kwargs: Any) -> Pager[Operation]:
        return self.client.pages(self.spec("/providers/Microsoft.Migrate/operations", OperationResultList), **kwargs)


class Projects(MigrateOperationGroup):
    def list_by_subscription(self, **kwargs: Any) -> Pager[Project]:
        spec = self.spec("/subscriptions/{subscription_id}/providers/Microsoft.Migrate/assessmentProjects", ProjectResultList)  # fmt: skip # noqa: E501
        return self.client.pages(spec, **kwargs)

    def list(self, resource_group_name: str, **kwargs: Any) -> Pager[Project]:
        return self.client.pages(
            self.spec(ProjectsPath, ProjectResultList), resource_group_name=resource_group_name, **kwargs
        )

    def get(self, resource_group_name: str, project_name: str, **kwargs: Any) -> Project:
        return self.client.execute(  # type: ignore
            self.spec(ProjectPath, Project),
            resource_group_name=resource_group_name,
            project_name=project_name,
            **kwargs,
        )

    def create(
        self, resource_group_name: str, project_name: str, project: Optional[Project] = None, **kwargs: Any
    ) -> Project:
        spec = self.spec(ProjectPath, Project, method="PUT", expected_status=CreatedStatus)
        return self.client.execute(  # type: ignore
            spec, project, resource_group_name=resource_group_name, project_name=project_name, **kwargs
        )

    def update(
        self, resource_group_name: str, project_name: str, project: Optional[Project] = None, **kwargs: Any
    ) -> Project:
        spec = self.spec(ProjectPath, Project, method="PATCH")
        return self.client.execute(  # type: ignore
            spec, project, resource_group_name=resource_group_name, project_name=project_name, **kwargs
        )

    def delete(self, resource_group_name: str, project_name: str, **kwargs: Any) -> None:
        spec = self.spec(ProjectPath, method="DELETE", expected_status=DeletedStatus)
        self.client.execute(spec, resource_group_name=resource_group_name, project_name=project_name, **kwargs)

    def assessment_options(
        self, resource_group_name: str, project_name: str, assessment_options_name: str, **kwargs: Any
    ) -> AssessmentOptions:
        spec = self.spec(ProjectPath + "/assessmentOptions/{assessment_options_name}", AssessmentOptions)
        return self.client.execute(  # type: ignore
            spec,
            resource_group_name=resource_group_name,
            project_name=project_name,
            assessment_options_name=assessment_options_name,
            **kwargs,
        )

    def list_assessment_options(
        self, resource_group_name: str, project_name: str, **kwargs: Any
    ) -> Pager[AssessmentOptions]:
        spec = self.spec(ProjectPath + "/assessmentOptions", AssessmentOptionsResultList)
        return self.client.pages(spec, resource_group_name=resource_group_name, project_name=project_name, **kwargs)


class Machines(MigrateOperationGroup):
    def list_by_project(self, resource_group_name: str, project_name: str, **kwargs: Any) -> Pager[Machine]:
        spec = self.spec(ProjectChildPath + "/machines", MachineResultList)
        return self.client.pages(spec, resource_group_name=resource_group_name, project_name=project_name, **kwargs)

    def get(self, resource_group_name: str, project_name: str, machine_name: str, **kwargs: Any) -> Machine:
        spec = self.spec(ProjectChildPath + "/machines/{machine_name}", Machine)
        return self.client.execute(  # type: ignore
            spec,
            resource_group_name=resource_group_name,
            project_name=project_name,
            machine_name=machine_name,
            **kwargs,
        )


class Groups(MigrateOperationGroup):
    def list_by_project(self, resource_group_name: str, project_name: str, **kwargs: Any) -> Pager[Group]:
        spec = self.spec(ProjectChildPath + "/groups", GroupResultList)
        return self.client.pages(spec, resource_group_name=resource_group_name, project_name=project_name, **kwargs)

    def get(self, resource_group_name: str, project_name: str, group_name: str, **kwargs: Any) -> Group:
        return self.client.execute(  # type: ignore
            self.spec(GroupPath, Group),
            resource_group_name=resource_group_name,
            project_name=project_name,
            group_name=group_name,
            **kwargs,
        )

    def create(
        self,
        resource_group_name: str,
        project_name: str,
        group_name: str,
        group: Optional[Group] = None,
        **kwargs: Any,
    ) -> Group:
        return self.client.execute(  # type: ignore
            self.spec(GroupPath, Group, method="PUT", expected_status=CreatedStatus),
            group,
            resource_group_name=resource_group_name,
            project_name=project_name,
            group_name=group_name,
            **kwargs,
        )

    def delete(self, resource_group_name: str, project_name: str, group_name: str, **kwargs: Any) -> None:
        self.client.execute(
            self.spec(GroupPath, method="DELETE", expected_status=DeletedStatus),
            resource_group_name=resource_group_name,
            project_name=project_name,
            group_name=group_name,
            **kwargs,
        )

    def update_machines(
        self,
        resource_group_name: str,
        project_name: str,
        group_name: str,
        body: Optional[UpdateGroupBody] = None,
        **kwargs: Any,
    ) -> Group:
        """
        Add machines to or remove machines from the group, as defined by the operation type of the body.
        """
        return self.client.execute(  # type: ignore
            self.spec(GroupPath + "/updateMachines", Group, method="POST"),
            body,
            resource_group_name=resource_group_name,
            project_name=project_name,
            group_name=group_name,
            **kwargs,
        )


class Assessments(MigrateOperationGroup):
    def list_by_project(self, resource_group_name: str, project_name: str, **kwargs: Any) -> Pager[Assessment]:
        spec = self.spec(ProjectChildPath + "/assessments", AssessmentResultList)
        return self.client.pages(spec, resource_group_name=resource_group_name, project_name=project_name, **kwargs)

    def list_by_group(
        self, resource_group_name: str, project_name: str, group_name: str, **kwargs: Any
    ) -> Pager[Assessment]:
        return self.client.pages(
            self.spec(GroupPath + "/assessments", AssessmentResultList),
            resource_group_name=resource_group_name,
            project_name=project_name,
            group_name=group_name,
            **kwargs,
        )

    def get(
        self, resource_group_name: str, project_name: str, group_name: str, assessment_name: str, **kwargs: Any
    ) -> Assessment:
        return self.client.execute(  # type: ignore
            self.spec(AssessmentPath, Assessment),
            resource_group_name=resource_group_name,
            project_name=project_name,
            group_name=group_name,
            assessment_name=assessment_name,
            **kwargs,
        )

    def create(
        self,
        resource_group_name: str,
        project_name: str,
        group_name: str,
        assessment_name: str,
        assessment: Optional[Assessment] = None,
        **kwargs: Any,
    ) -> Assessment:
        return self.client.execute(  # type: ignore
            self.spec(AssessmentPath, Assessment, method="PUT", expected_status=CreatedStatus),
            assessment,
            resource_group_name=resource_group_name,
            project_name=project_name,
            group_name=group_name,
            assessment_name=assessment_name,
            **kwargs,
        )

    def delete(
        self, resource_group_name: str, project_name: str, group_name: str, assessment_name: str, **kwargs: Any
    ) -> None:
        self.client.execute(
            self.spec(AssessmentPath, method="DELETE", expected_status=DeletedStatus),
            resource_group_name=resource_group_name,
            project_name=project_name,
            group_name=group_name,
            assessment_name=assessment_name,
            **kwargs,
        )

    def get_report_download_url(
        self, resource_group_name: str, project_name: str, group_name: str, assessment_name: str, **kwargs: Any
    ) -> DownloadUrl:
        return self.client.execute(  # type: ignore
            self.spec(AssessmentPath + "/downloadUrl", DownloadUrl, method="POST"),
            resource_group_name=resource_group_name,
            project_name=project_name,
            group_name=group_name,
            assessment_name=assessment_name,
            **kwargs,
        )


class AssessedMachines(MigrateOperationGroup):
    def list_by_assessment(
        self, resource_group_name: str, project_name: str, group_name: str, assessment_name: str, **kwargs: Any
    ) -> Pager[AssessedMachine]:
        return self.client.pages(
            self.spec(AssessmentPath + "/assessedMachines", AssessedMachineResultList),
            resource_group_name=resource_group_name,
            project_name=project_name,
            group_name=group_name,
            assessment_name=assessment_name,
            **kwargs,
        )

    def get(
        self,
        resource_group_name: str,
        project_name: str,
        group_name: str,
        assessment_name: str,
        assessed_machine_name: str,
        **kwargs: Any,
    ) -> AssessedMachine:
        return self.client.execute(  # type: ignore
            self.spec(AssessmentPath + "/assessedMachines/{assessed_machine_name}", AssessedMachine),
            resource_group_name=resource_group_name,
            project_name=project_name,
            group_name=group_name,
            assessment_name=assessment_name,
            assessed_machine_name=assessed_machine_name,
            **kwargs,
        )


class Collectors(MigrateOperationGroup, Generic[C]):
    """
    All collector kinds of a project share the same operations, only the collection and the body differ.
    """

    def __init__(self, client: ArmClient, collection: str, item_type: Type[C], list_type: Type[ListResult]) -> None:
        super().__init__(client)
        self.path = ProjectChildPath + "/" + collection
        self.item_type = item_type
        self.list_type = list_type

    def list_by_project(self, resource_group_name: str, project_name: str, **kwargs: Any) -> Pager[C]:
        return self.client.pages(
            self.spec(self.path, self.list_type),
            resource_group_name=resource_group_name,
            project_name=project_name,
            **kwargs,
        )

    def get(self, resource_group_name: str, project_name: str, collector_name: str, **kwargs: Any) -> C:
        return self.client.execute(  # type: ignore
            self.spec(self.path + "/{collector_name}", self.item_type),
            resource_group_name=resource_group_name,
            project_name=project_name,
            collector_name=collector_name,
            **kwargs,
        )

    def create(
        self,
        resource_group_name: str,
        project_name: str,
        collector_name: str,
        collector_body: Optional[C] = None,
        **kwargs: Any,
    ) -> C:
        return self.client.execute(  # type: ignore
            self.spec(self.path + "/{collector_name}", self.item_type, method="PUT", expected_status=CreatedStatus),
            collector_body,
            resource_group_name=resource_group_name,
            project_name=project_name,
            collector_name=collector_name,
            **kwargs,
        )

    def delete(self, resource_group_name: str, project_name: str, collector_name: str, **kwargs: Any) -> None:
        self.client.execute(
            self.spec(self.path + "/{collector_name}", method="DELETE", expected_status=DeletedStatus),
            resource_group_name=resource_group_name,
            project_name=project_name,
            collector_name=collector_name,
            **kwargs,
        )


class PrivateEndpointConnections(MigrateOperationGroup):
    path = ProjectLinkPath + "/privateEndpointConnections"

    def list_by_project(
        self, resource_group_name: str, project_name: str, **kwargs: Any
    ) -> Pager[PrivateEndpointConnection]:
        return self.client.pages(
            self.spec(self.path, PrivateEndpointConnectionCollection),
            resource_group_name=resource_group_name,
            project_name=project_name,
            **kwargs,
        )

    def get(
        self, resource_group_name: str, project_name: str, private_endpoint_connection_name: str, **kwargs: Any
    ) -> PrivateEndpointConnection:
        return self.client.execute(  # type: ignore
            self.spec(self.path + "/{private_endpoint_connection_name}", PrivateEndpointConnection),
            resource_group_name=resource_group_name,
            project_name=project_name,
            private_endpoint_connection_name=private_endpoint_connection_name,
            **kwargs,
        )

    def update(
        self,
        resource_group_name: str,
        project_name: str,
        private_endpoint_connection_name: str,
        private_endpoint_connection: Optional[PrivateEndpointConnection] = None,
        **kwargs: Any,
    ) -> Optional[PrivateEndpointConnection]:
        return self.client.execute(  # type: ignore
            self.spec(
                self.path + "/{private_endpoint_connection_name}",
                PrivateEndpointConnection,
                method="PUT",
                expected_status=UpdatedStatus,
            ),
            private_endpoint_connection,
            resource_group_name=resource_group_name,
            project_name=project_name,
            private_endpoint_connection_name=private_endpoint_connection_name,
            **kwargs,
        )

    def delete(
        self, resource_group_name: str, project_name: str, private_endpoint_connection_name: str, **kwargs: Any
    ) -> None:
        self.client.execute(
            self.spec(
                self.path + "/{private_endpoint_connection_name}", method="DELETE", expected_status=DeletedStatus
            ),
            resource_group_name=resource_group_name,
            project_name=project_name,
            private_endpoint_connection_name=private_endpoint_connection_name,
            **kwargs,
        )


class PrivateLinkResources(MigrateOperationGroup):
    path = ProjectLinkPath + "/privateLinkResources"

    def list_by_project(self, resource_group_name: str, project_name: str, **kwargs: Any) -> Pager[PrivateLinkResource]:
        return self.client.pages(
            self.spec(self.path, PrivateLinkResourceCollection),
            resource_group_name=resource_group_name,
            project_name=project_name,
            **kwargs,
        )

    def get(
        self, resource_group_name: str, project_name: str, private_link_resource_name: str, **kwargs: Any
    ) -> PrivateLinkResource:
        return self.client.execute(  # type: ignore
            self.spec(self.path + "/{private_link_resource_name}", PrivateLinkResource),
            resource_group_name=resource_group_name,
            project_name=project_name,
            private_link_resource_name=private_link_resource_name,
            **kwargs,
        )


class MigrateClient:
    """
    Client of the Azure Migrate assessment service (Microsoft.Migrate/assessmentProjects).
    """

    def __init__(
        self, credential: AzureCredentials, subscription_id: str, config: Optional[ArmClientConfig] = None
    ) -> None:
        self.config = config or ArmClientConfig()
        self.client = ArmClient.create(self.config, credential, subscription_id)
        self.operations = Operations(self.client)
        self.projects = Projects(self.client)
        self.machines = Machines(self.client)
        self.groups = Groups(self.client)
        self.assessments = Assessments(self.client)
        self.assessed_machines = AssessedMachines(self.client)
        self.hyper_v_collectors = Collectors(self.client, "hypervcollectors", HyperVCollector, HyperVCollectorList)
        self.server_collectors = Collectors(self.client, "servercollectors", ServerCollector, ServerCollectorList)
        self.v_mware_collectors = Collectors(self.client, "vmwarecollectors", VMwareCollector, VMwareCollectorList)
        self.import_collectors = Collectors(self.client, "importcollectors", ImportCollector, ImportCollectorList)
        self.private_endpoint_connections = PrivateEndpointConnections(self.client)
        self.private_link_resources = PrivateLinkResources(self.client)

    @staticmethod
    def from_config(config: ArmClientConfig) -> "MigrateClient":
        if config.account.subscription_id is None:
            raise ValueError("No subscription_id configured for the azure account")
        return MigrateClient(config.account.credentials(), config.account.subscription_id, config)

    def close(self) -> None:
        self.client.close()
