from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Required, TypedDict

from awsclients.aws.api.core import HttpMethod, ServiceRequest, SignerType
from awsclients.aws.service import Operation, ServiceClient

ApplicationDeploymentLifecycle = Literal["Deploying", "Deployed"]
ApplicationLifecycle = Literal["Creating", "Created", "Available", "Ready", "Starting", "Running", "Stopping", "Stopped", "Failed", "Deleting", "Deleting From Environment"]
ApplicationVersionLifecycle = Literal["Creating", "Available", "Failed"]
BatchJobExecutionStatus = Literal["Submitting", "Holding", "Dispatching", "Running", "Cancelling", "Cancelled", "Succeeded", "Failed", "Purged", "Succeeded With Warning"]
BatchJobType = Literal["VSE", "JES2", "JES3"]
DataSetTaskLifecycle = Literal["Creating", "Running", "Completed", "Failed"]
DeploymentLifecycle = Literal["Deploying", "Succeeded", "Failed", "Updating Deployment"]
EngineType = Literal["microfocus", "bluage"]
EnvironmentLifecycle = Literal["Creating", "Available", "Updating", "Deleting", "Failed"]


class MainframeModernizationErrors(str, Enum):
    ACCESS_DENIED = "AccessDeniedException"
    CONFLICT = "ConflictException"
    EXECUTION_TIMEOUT = "ExecutionTimeoutException"
    INTERNAL_SERVER = "InternalServerException"
    RESOURCE_NOT_FOUND = "ResourceNotFoundException"
    SERVICE_QUOTA_EXCEEDED = "ServiceQuotaExceededException"
    SERVICE_UNAVAILABLE = "ServiceUnavailableException"
    THROTTLING = "ThrottlingException"
    VALIDATION = "ValidationException"


RETRYABLE_ERRORS = frozenset(
    {
        MainframeModernizationErrors.EXECUTION_TIMEOUT,
        MainframeModernizationErrors.INTERNAL_SERVER,
        MainframeModernizationErrors.SERVICE_UNAVAILABLE,
        MainframeModernizationErrors.THROTTLING,
    }
)


class CancelBatchJobExecutionRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    executionId: Required[str]


class CancelBatchJobExecutionResponse(TypedDict, total=False):
    pass


class Definition(TypedDict, total=False):
    content: str
    s3Location: str


class CreateApplicationRequest(ServiceRequest, total=False):
    clientToken: str
    definition: Required[Definition]
    description: str
    engineType: Required[EngineType]
    kmsKeyId: str
    name: Required[str]
    roleArn: str
    tags: Dict[str, str]


class CreateApplicationResponse(TypedDict, total=False):
    applicationArn: Required[str]
    applicationId: Required[str]
    applicationVersion: Required[int]


class GdgAttributes(TypedDict, total=False):
    limit: int
    rollDisposition: str


class PoAttributes(TypedDict, total=False):
    encoding: str
    format: Required[str]
    memberFileExtensions: Required[List[str]]


class PsAttributes(TypedDict, total=False):
    encoding: str
    format: Required[str]


class AlternateKey(TypedDict, total=False):
    allowDuplicates: bool
    length: Required[int]
    name: str
    offset: Required[int]


class PrimaryKey(TypedDict, total=False):
    length: Required[int]
    name: str
    offset: Required[int]


class VsamAttributes(TypedDict, total=False):
    alternateKeys: List[AlternateKey]
    compressed: bool
    encoding: str
    format: Required[str]
    primaryKey: PrimaryKey


class DatasetOrgAttributes(TypedDict, total=False):
    gdg: GdgAttributes
    po: PoAttributes
    ps: PsAttributes
    vsam: VsamAttributes


class RecordLength(TypedDict, total=False):
    max: Required[int]
    min: Required[int]


class DataSet(TypedDict, total=False):
    datasetName: Required[str]
    datasetOrg: Required[DatasetOrgAttributes]
    recordLength: Required[RecordLength]
    relativePath: str
    storageType: str


class ExternalLocation(TypedDict, total=False):
    s3Location: str


class DataSetImportItem(TypedDict, total=False):
    dataSet: Required[DataSet]
    externalLocation: Required[ExternalLocation]


class DataSetImportConfig(TypedDict, total=False):
    dataSets: List[DataSetImportItem]
    s3Location: str


class CreateDataSetImportTaskRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    clientToken: str
    importConfig: Required[DataSetImportConfig]


class CreateDataSetImportTaskResponse(TypedDict, total=False):
    taskId: Required[str]


class CreateDeploymentRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    applicationVersion: Required[int]
    clientToken: str
    environmentId: Required[str]


class CreateDeploymentResponse(TypedDict, total=False):
    deploymentId: Required[str]


class HighAvailabilityConfig(TypedDict, total=False):
    desiredCapacity: Required[int]


class EfsStorageConfiguration(TypedDict, total=False):
    fileSystemId: Required[str]
    mountPoint: Required[str]


class FsxStorageConfiguration(TypedDict, total=False):
    fileSystemId: Required[str]
    mountPoint: Required[str]


class StorageConfiguration(TypedDict, total=False):
    efs: EfsStorageConfiguration
    fsx: FsxStorageConfiguration


class CreateEnvironmentRequest(ServiceRequest, total=False):
    clientToken: str
    description: str
    engineType: Required[EngineType]
    engineVersion: str
    highAvailabilityConfig: HighAvailabilityConfig
    instanceType: Required[str]
    kmsKeyId: str
    name: Required[str]
    preferredMaintenanceWindow: str
    publiclyAccessible: bool
    securityGroupIds: List[str]
    storageConfigurations: List[StorageConfiguration]
    subnetIds: List[str]
    tags: Dict[str, str]


class CreateEnvironmentResponse(TypedDict, total=False):
    environmentId: Required[str]


class DeleteApplicationRequest(ServiceRequest, total=False):
    applicationId: Required[str]


class DeleteApplicationResponse(TypedDict, total=False):
    pass


class DeleteApplicationFromEnvironmentRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    environmentId: Required[str]


class DeleteApplicationFromEnvironmentResponse(TypedDict, total=False):
    pass


class DeleteEnvironmentRequest(ServiceRequest, total=False):
    environmentId: Required[str]


class DeleteEnvironmentResponse(TypedDict, total=False):
    pass


class GetApplicationRequest(ServiceRequest, total=False):
    applicationId: Required[str]


class DeployedVersionSummary(TypedDict, total=False):
    applicationVersion: Required[int]
    status: Required[DeploymentLifecycle]
    statusReason: str


class ApplicationVersionSummary(TypedDict, total=False):
    applicationVersion: Required[int]
    creationTime: Required[datetime]
    status: Required[ApplicationVersionLifecycle]
    statusReason: str


class LogGroupSummary(TypedDict, total=False):
    logGroupName: Required[str]
    logType: Required[str]


class GetApplicationResponse(TypedDict, total=False):
    applicationArn: Required[str]
    applicationId: Required[str]
    creationTime: Required[datetime]
    deployedVersion: DeployedVersionSummary
    description: str
    engineType: Required[EngineType]
    environmentId: str
    kmsKeyId: str
    lastStartTime: datetime
    latestVersion: Required[ApplicationVersionSummary]
    listenerArns: List[str]
    listenerPorts: List[int]
    loadBalancerDnsName: str
    logGroups: List[LogGroupSummary]
    name: Required[str]
    roleArn: str
    status: Required[ApplicationLifecycle]
    statusReason: str
    tags: Dict[str, str]
    targetGroupArns: List[str]


class GetApplicationVersionRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    applicationVersion: Required[int]


class GetApplicationVersionResponse(TypedDict, total=False):
    applicationVersion: Required[int]
    creationTime: Required[datetime]
    definitionContent: Required[str]
    description: str
    name: Required[str]
    status: Required[ApplicationVersionLifecycle]
    statusReason: str


class GetBatchJobExecutionRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    executionId: Required[str]


class FileBatchJobIdentifier(TypedDict, total=False):
    fileName: Required[str]
    folderPath: str


class JobStepRestartMarker(TypedDict, total=False):
    fromProcStep: str
    fromStep: Required[str]
    toProcStep: str
    toStep: str


class RestartBatchJobIdentifier(TypedDict, total=False):
    executionId: Required[str]
    jobStepRestartMarker: Required[JobStepRestartMarker]


class JobIdentifier(TypedDict, total=False):
    fileName: str
    scriptName: str


class S3BatchJobIdentifier(TypedDict, total=False):
    bucket: Required[str]
    identifier: Required[JobIdentifier]
    keyPrefix: str


class ScriptBatchJobIdentifier(TypedDict, total=False):
    scriptName: Required[str]


class BatchJobIdentifier(TypedDict, total=False):
    fileBatchJobIdentifier: FileBatchJobIdentifier
    restartBatchJobIdentifier: RestartBatchJobIdentifier
    s3BatchJobIdentifier: S3BatchJobIdentifier
    scriptBatchJobIdentifier: ScriptBatchJobIdentifier


class GetBatchJobExecutionResponse(TypedDict, total=False):
    applicationId: Required[str]
    batchJobIdentifier: BatchJobIdentifier
    endTime: datetime
    executionId: Required[str]
    jobId: str
    jobName: str
    jobStepRestartMarker: JobStepRestartMarker
    jobType: BatchJobType
    jobUser: str
    returnCode: str
    startTime: Required[datetime]
    status: Required[BatchJobExecutionStatus]
    statusReason: str


class GetDataSetDetailsRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    dataSetName: Required[str]


class GdgDetailAttributes(TypedDict, total=False):
    limit: int
    rollDisposition: str


class PoDetailAttributes(TypedDict, total=False):
    encoding: Required[str]
    format: Required[str]


class PsDetailAttributes(TypedDict, total=False):
    encoding: Required[str]
    format: Required[str]


class VsamDetailAttributes(TypedDict, total=False):
    alternateKeys: List[AlternateKey]
    cacheAtStartup: bool
    compressed: bool
    encoding: str
    primaryKey: PrimaryKey
    recordFormat: str


class DatasetDetailOrgAttributes(TypedDict, total=False):
    gdg: GdgDetailAttributes
    po: PoDetailAttributes
    ps: PsDetailAttributes
    vsam: VsamDetailAttributes


class GetDataSetDetailsResponse(TypedDict, total=False):
    blocksize: int
    creationTime: datetime
    dataSetName: Required[str]
    dataSetOrg: DatasetDetailOrgAttributes
    fileSize: int
    lastReferencedTime: datetime
    lastUpdatedTime: datetime
    location: str
    recordLength: int


class GetDataSetImportTaskRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    taskId: Required[str]


class DataSetImportSummary(TypedDict, total=False):
    failed: Required[int]
    inProgress: Required[int]
    pending: Required[int]
    succeeded: Required[int]
    total: Required[int]


class GetDataSetImportTaskResponse(TypedDict, total=False):
    status: Required[DataSetTaskLifecycle]
    summary: DataSetImportSummary
    taskId: Required[str]


class GetDeploymentRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    deploymentId: Required[str]


class GetDeploymentResponse(TypedDict, total=False):
    applicationId: Required[str]
    applicationVersion: Required[int]
    creationTime: Required[datetime]
    deploymentId: Required[str]
    environmentId: Required[str]
    status: Required[DeploymentLifecycle]
    statusReason: str


class GetEnvironmentRequest(ServiceRequest, total=False):
    environmentId: Required[str]


class MaintenanceSchedule(TypedDict, total=False):
    endTime: datetime
    startTime: datetime


class PendingMaintenance(TypedDict, total=False):
    engineVersion: str
    schedule: MaintenanceSchedule


class GetEnvironmentResponse(TypedDict, total=False):
    actualCapacity: int
    creationTime: Required[datetime]
    description: str
    engineType: Required[EngineType]
    engineVersion: Required[str]
    environmentArn: Required[str]
    environmentId: Required[str]
    highAvailabilityConfig: HighAvailabilityConfig
    instanceType: Required[str]
    kmsKeyId: str
    loadBalancerArn: str
    name: Required[str]
    pendingMaintenance: PendingMaintenance
    preferredMaintenanceWindow: str
    publiclyAccessible: bool
    securityGroupIds: Required[List[str]]
    status: Required[EnvironmentLifecycle]
    statusReason: str
    storageConfigurations: List[StorageConfiguration]
    subnetIds: Required[List[str]]
    tags: Dict[str, str]
    vpcId: Required[str]


class GetSignedBluinsightsUrlResponse(TypedDict, total=False):
    signedBiUrl: Required[str]


class ListApplicationVersionsRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    maxResults: int
    nextToken: str


class ListApplicationVersionsResponse(TypedDict, total=False):
    applicationVersions: Required[List[ApplicationVersionSummary]]
    nextToken: str


class ListApplicationsRequest(ServiceRequest, total=False):
    environmentId: str
    maxResults: int
    names: List[str]
    nextToken: str


class ApplicationSummary(TypedDict, total=False):
    applicationArn: Required[str]
    applicationId: Required[str]
    applicationVersion: Required[int]
    creationTime: Required[datetime]
    deploymentStatus: ApplicationDeploymentLifecycle
    description: str
    engineType: Required[EngineType]
    environmentId: str
    lastStartTime: datetime
    name: Required[str]
    roleArn: str
    status: Required[ApplicationLifecycle]
    versionStatus: ApplicationVersionLifecycle


class ListApplicationsResponse(TypedDict, total=False):
    applications: Required[List[ApplicationSummary]]
    nextToken: str


class ListBatchJobDefinitionsRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    maxResults: int
    nextToken: str
    prefix: str


class FileBatchJobDefinition(TypedDict, total=False):
    fileName: Required[str]
    folderPath: str


class ScriptBatchJobDefinition(TypedDict, total=False):
    scriptName: Required[str]


class BatchJobDefinition(TypedDict, total=False):
    fileBatchJobDefinition: FileBatchJobDefinition
    scriptBatchJobDefinition: ScriptBatchJobDefinition


class ListBatchJobDefinitionsResponse(TypedDict, total=False):
    batchJobDefinitions: Required[List[BatchJobDefinition]]
    nextToken: str


class ListBatchJobExecutionsRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    executionIds: List[str]
    jobName: str
    maxResults: int
    nextToken: str
    startedAfter: datetime
    startedBefore: datetime
    status: BatchJobExecutionStatus


class BatchJobExecutionSummary(TypedDict, total=False):
    applicationId: Required[str]
    batchJobIdentifier: BatchJobIdentifier
    endTime: datetime
    executionId: Required[str]
    jobId: str
    jobName: str
    jobType: BatchJobType
    returnCode: str
    startTime: Required[datetime]
    status: Required[BatchJobExecutionStatus]


class ListBatchJobExecutionsResponse(TypedDict, total=False):
    batchJobExecutions: Required[List[BatchJobExecutionSummary]]
    nextToken: str


class ListBatchJobRestartPointsRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    executionId: Required[str]


class JobStep(TypedDict, total=False):
    procStepName: str
    procStepNumber: int
    stepCondCode: str
    stepName: str
    stepNumber: int
    stepRestartable: bool


class ListBatchJobRestartPointsResponse(TypedDict, total=False):
    batchJobSteps: List[JobStep]


class ListDataSetImportHistoryRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    maxResults: int
    nextToken: str


class DataSetImportTask(TypedDict, total=False):
    status: Required[DataSetTaskLifecycle]
    statusReason: str
    summary: Required[DataSetImportSummary]
    taskId: Required[str]


class ListDataSetImportHistoryResponse(TypedDict, total=False):
    dataSetImportTasks: Required[List[DataSetImportTask]]
    nextToken: str


class ListDataSetsRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    maxResults: int
    nameFilter: str
    nextToken: str
    prefix: str


class DataSetSummary(TypedDict, total=False):
    creationTime: datetime
    dataSetName: Required[str]
    dataSetOrg: str
    format: str
    lastReferencedTime: datetime
    lastUpdatedTime: datetime


class ListDataSetsResponse(TypedDict, total=False):
    dataSets: Required[List[DataSetSummary]]
    nextToken: str


class ListDeploymentsRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    maxResults: int
    nextToken: str


class DeploymentSummary(TypedDict, total=False):
    applicationId: Required[str]
    applicationVersion: Required[int]
    creationTime: Required[datetime]
    deploymentId: Required[str]
    environmentId: Required[str]
    status: Required[DeploymentLifecycle]
    statusReason: str


class ListDeploymentsResponse(TypedDict, total=False):
    deployments: Required[List[DeploymentSummary]]
    nextToken: str


class ListEngineVersionsRequest(ServiceRequest, total=False):
    engineType: EngineType
    maxResults: int
    nextToken: str


class EngineVersionsSummary(TypedDict, total=False):
    engineType: Required[str]
    engineVersion: Required[str]


class ListEngineVersionsResponse(TypedDict, total=False):
    engineVersions: Required[List[EngineVersionsSummary]]
    nextToken: str


class ListEnvironmentsRequest(ServiceRequest, total=False):
    engineType: EngineType
    maxResults: int
    names: List[str]
    nextToken: str


class EnvironmentSummary(TypedDict, total=False):
    creationTime: Required[datetime]
    engineType: Required[EngineType]
    engineVersion: Required[str]
    environmentArn: Required[str]
    environmentId: Required[str]
    instanceType: Required[str]
    name: Required[str]
    status: Required[EnvironmentLifecycle]


class ListEnvironmentsResponse(TypedDict, total=False):
    environments: Required[List[EnvironmentSummary]]
    nextToken: str


class ListTagsForResourceRequest(ServiceRequest, total=False):
    resourceArn: Required[str]


class ListTagsForResourceResponse(TypedDict, total=False):
    tags: Required[Dict[str, str]]


class StartApplicationRequest(ServiceRequest, total=False):
    applicationId: Required[str]


class StartApplicationResponse(TypedDict, total=False):
    pass


class StartBatchJobRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    batchJobIdentifier: Required[BatchJobIdentifier]
    jobParams: Dict[str, str]


class StartBatchJobResponse(TypedDict, total=False):
    executionId: Required[str]


class StopApplicationRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    forceStop: bool


class StopApplicationResponse(TypedDict, total=False):
    pass


class TagResourceRequest(ServiceRequest, total=False):
    resourceArn: Required[str]
    tags: Required[Dict[str, str]]


class TagResourceResponse(TypedDict, total=False):
    pass


class UntagResourceRequest(ServiceRequest, total=False):
    resourceArn: Required[str]
    tagKeys: Required[List[str]]


class UntagResourceResponse(TypedDict, total=False):
    pass


class UpdateApplicationRequest(ServiceRequest, total=False):
    applicationId: Required[str]
    currentApplicationVersion: Required[int]
    definition: Definition
    description: str


class UpdateApplicationResponse(TypedDict, total=False):
    applicationVersion: Required[int]


class UpdateEnvironmentRequest(ServiceRequest, total=False):
    applyDuringMaintenanceWindow: bool
    desiredCapacity: int
    engineVersion: str
    environmentId: Required[str]
    forceUpdate: bool
    instanceType: str
    preferredMaintenanceWindow: str


class UpdateEnvironmentResponse(TypedDict, total=False):
    environmentId: Required[str]


class MainframeModernizationClient(ServiceClient):
    """Client of AWSMainframeModernization (2021-04-28)."""

    service = "m2"
    version = "2021-04-28"
    client_name = "AWSMainframeModernization"
    errors = MainframeModernizationErrors
    retryable_errors = RETRYABLE_ERRORS

    cancel_batch_job_execution = Operation(
        "CancelBatchJobExecution",
        CancelBatchJobExecutionRequest,
        CancelBatchJobExecutionResponse,
        method=HttpMethod.POST,
        path="/applications/{applicationId}/batch-job-executions/{executionId}/cancel",
        required=("applicationId", "executionId"),
    )

    create_application = Operation(
        "CreateApplication",
        CreateApplicationRequest,
        CreateApplicationResponse,
        method=HttpMethod.POST,
        path="/applications",
    )

    create_data_set_import_task = Operation(
        "CreateDataSetImportTask",
        CreateDataSetImportTaskRequest,
        CreateDataSetImportTaskResponse,
        method=HttpMethod.POST,
        path="/applications/{applicationId}/dataset-import-task",
        required=("applicationId",),
    )

    create_deployment = Operation(
        "CreateDeployment",
        CreateDeploymentRequest,
        CreateDeploymentResponse,
        method=HttpMethod.POST,
        path="/applications/{applicationId}/deployments",
        required=("applicationId",),
    )

    create_environment = Operation(
        "CreateEnvironment",
        CreateEnvironmentRequest,
        CreateEnvironmentResponse,
        method=HttpMethod.POST,
        path="/environments",
    )

    delete_application = Operation(
        "DeleteApplication",
        DeleteApplicationRequest,
        DeleteApplicationResponse,
        method=HttpMethod.DELETE,
        path="/applications/{applicationId}",
        required=("applicationId",),
    )

    delete_application_from_environment = Operation(
        "DeleteApplicationFromEnvironment",
        DeleteApplicationFromEnvironmentRequest,
        DeleteApplicationFromEnvironmentResponse,
        method=HttpMethod.DELETE,
        path="/applications/{applicationId}/environment/{environmentId}",
        required=("applicationId", "environmentId"),
    )

    delete_environment = Operation(
        "DeleteEnvironment",
        DeleteEnvironmentRequest,
        DeleteEnvironmentResponse,
        method=HttpMethod.DELETE,
        path="/environments/{environmentId}",
        required=("environmentId",),
    )

    get_application = Operation(
        "GetApplication",
        GetApplicationRequest,
        GetApplicationResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}",
        required=("applicationId",),
    )

    get_application_version = Operation(
        "GetApplicationVersion",
        GetApplicationVersionRequest,
        GetApplicationVersionResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/versions/{applicationVersion}",
        required=("applicationId", "applicationVersion"),
    )

    get_batch_job_execution = Operation(
        "GetBatchJobExecution",
        GetBatchJobExecutionRequest,
        GetBatchJobExecutionResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/batch-job-executions/{executionId}",
        required=("applicationId", "executionId"),
    )

    get_data_set_details = Operation(
        "GetDataSetDetails",
        GetDataSetDetailsRequest,
        GetDataSetDetailsResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/datasets/{dataSetName}",
        required=("applicationId", "dataSetName"),
    )

    get_data_set_import_task = Operation(
        "GetDataSetImportTask",
        GetDataSetImportTaskRequest,
        GetDataSetImportTaskResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/dataset-import-tasks/{taskId}",
        required=("applicationId", "taskId"),
    )

    get_deployment = Operation(
        "GetDeployment",
        GetDeploymentRequest,
        GetDeploymentResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/deployments/{deploymentId}",
        required=("applicationId", "deploymentId"),
    )

    get_environment = Operation(
        "GetEnvironment",
        GetEnvironmentRequest,
        GetEnvironmentResponse,
        method=HttpMethod.GET,
        path="/environments/{environmentId}",
        required=("environmentId",),
    )

    get_signed_bluinsights_url = Operation(
        "GetSignedBluinsightsUrl",
        ServiceRequest,
        GetSignedBluinsightsUrlResponse,
        method=HttpMethod.GET,
        path="/signed-bi-url",
    )

    list_application_versions = Operation(
        "ListApplicationVersions",
        ListApplicationVersionsRequest,
        ListApplicationVersionsResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/versions",
        required=("applicationId",),
    )

    list_applications = Operation(
        "ListApplications",
        ListApplicationsRequest,
        ListApplicationsResponse,
        method=HttpMethod.GET,
        path="/applications",
    )

    list_batch_job_definitions = Operation(
        "ListBatchJobDefinitions",
        ListBatchJobDefinitionsRequest,
        ListBatchJobDefinitionsResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/batch-job-definitions",
        required=("applicationId",),
    )

    list_batch_job_executions = Operation(
        "ListBatchJobExecutions",
        ListBatchJobExecutionsRequest,
        ListBatchJobExecutionsResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/batch-job-executions",
        required=("applicationId",),
    )

    list_batch_job_restart_points = Operation(
        "ListBatchJobRestartPoints",
        ListBatchJobRestartPointsRequest,
        ListBatchJobRestartPointsResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/batch-job-executions/{executionId}/steps",
        required=("applicationId", "executionId"),
    )

    list_data_set_import_history = Operation(
        "ListDataSetImportHistory",
        ListDataSetImportHistoryRequest,
        ListDataSetImportHistoryResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/dataset-import-tasks",
        required=("applicationId",),
    )

    list_data_sets = Operation(
        "ListDataSets",
        ListDataSetsRequest,
        ListDataSetsResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/datasets",
        required=("applicationId",),
    )

    list_deployments = Operation(
        "ListDeployments",
        ListDeploymentsRequest,
        ListDeploymentsResponse,
        method=HttpMethod.GET,
        path="/applications/{applicationId}/deployments",
        required=("applicationId",),
    )

    list_engine_versions = Operation(
        "ListEngineVersions",
        ListEngineVersionsRequest,
        ListEngineVersionsResponse,
        method=HttpMethod.GET,
        path="/engine-versions",
    )

    list_environments = Operation(
        "ListEnvironments",
        ListEnvironmentsRequest,
        ListEnvironmentsResponse,
        method=HttpMethod.GET,
        path="/environments",
    )

    list_tags_for_resource = Operation(
        "ListTagsForResource",
        ListTagsForResourceRequest,
        ListTagsForResourceResponse,
        method=HttpMethod.GET,
        path="/tags/{resourceArn}",
        required=("resourceArn",),
    )

    start_application = Operation(
        "StartApplication",
        StartApplicationRequest,
        StartApplicationResponse,
        method=HttpMethod.POST,
        path="/applications/{applicationId}/start",
        required=("applicationId",),
    )

    start_batch_job = Operation(
        "StartBatchJob",
        StartBatchJobRequest,
        StartBatchJobResponse,
        method=HttpMethod.POST,
        path="/applications/{applicationId}/batch-job",
        required=("applicationId",),
    )

    stop_application = Operation(
        "StopApplication",
        StopApplicationRequest,
        StopApplicationResponse,
        method=HttpMethod.POST,
        path="/applications/{applicationId}/stop",
        required=("applicationId",),
    )

    tag_resource = Operation(
        "TagResource",
        TagResourceRequest,
        TagResourceResponse,
        method=HttpMethod.POST,
        path="/tags/{resourceArn}",
        required=("resourceArn",),
    )

    untag_resource = Operation(
        "UntagResource",
        UntagResourceRequest,
        UntagResourceResponse,
        method=HttpMethod.DELETE,
        path="/tags/{resourceArn}",
        required=("resourceArn", "tagKeys"),
    )

    update_application = Operation(
        "UpdateApplication",
        UpdateApplicationRequest,
        UpdateApplicationResponse,
        method=HttpMethod.PATCH,
        path="/applications/{applicationId}",
        required=("applicationId",),
    )

    update_environment = Operation(
        "UpdateEnvironment",
        UpdateEnvironmentRequest,
        UpdateEnvironmentResponse,
        method=HttpMethod.PATCH,
        path="/environments/{environmentId}",
        required=("environmentId",),
    )
