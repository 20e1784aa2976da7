from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Required, TypedDict

from awsclients.aws.api.core import HttpMethod, ServiceRequest, SignerType
from awsclients.aws.service import Operation, ServiceClient

AcceptanceType = Literal["ACCEPT", "REJECT"]
BackfillMode = Literal["AUTOMATIC", "MANUAL"]
BalancingStrategy = Literal["SPOT_ONLY", "SPOT_PREFERRED", "ON_DEMAND_ONLY"]
BuildStatus = Literal["INITIALIZED", "READY", "FAILED"]
CertificateType = Literal["DISABLED", "GENERATED"]
ComparisonOperatorType = Literal["GreaterThanOrEqualToThreshold", "GreaterThanThreshold", "LessThanThreshold", "LessThanOrEqualToThreshold"]
ComputeStatus = Literal["PENDING", "ACTIVE", "TERMINATING"]
ComputeType = Literal["EC2", "ANYWHERE", "CONTAINER"]
ContainerDependencyCondition = Literal["START", "COMPLETE", "SUCCESS", "HEALTHY"]
ContainerGroupDefinitionStatus = Literal["READY", "COPYING", "FAILED"]
ContainerOperatingSystem = Literal["AMAZON_LINUX_2023"]
ContainerSchedulingStrategy = Literal["REPLICA", "DAEMON"]
EC2InstanceType = Literal["t2.micro", "t2.small", "t2.medium", "t2.large", "c3.large", "c3.xlarge", "c3.2xlarge", "c3.4xlarge", "c3.8xlarge", "c4.large", "c4.xlarge", "c4.2xlarge", "c4.4xlarge", "c4.8xlarge", "c5.large", "c5.xlarge", "c5.2xlarge", "c5.4xlarge", "c5.9xlarge", "c5.12xlarge", "c5.18xlarge", "c5.24xlarge", "c5a.large", "c5a.xlarge", "c5a.2xlarge", "c5a.4xlarge", "c5a.8xlarge", "c5a.12xlarge", "c5a.16xlarge", "c5a.24xlarge", "r3.large", "r3.xlarge", "r3.2xlarge", "r3.4xlarge", "r3.8xlarge", "r4.large", "r4.xlarge", "r4.2xlarge", "r4.4xlarge", "r4.8xlarge", "r4.16xlarge", "r5.large", "r5.xlarge", "r5.2xlarge", "r5.4xlarge", "r5.8xlarge", "r5.12xlarge", "r5.16xlarge", "r5.24xlarge", "r5a.large", "r5a.xlarge", "r5a.2xlarge", "r5a.4xlarge", "r5a.8xlarge", "r5a.12xlarge", "r5a.16xlarge", "r5a.24xlarge", "m3.medium", "m3.large", "m3.xlarge", "m3.2xlarge", "m4.large", "m4.xlarge", "m4.2xlarge", "m4.4xlarge", "m4.10xlarge", "m5.large", "m5.xlarge", "m5.2xlarge", "m5.4xlarge", "m5.8xlarge", "m5.12xlarge", "m5.16xlarge", "m5.24xlarge", "m5a.large", "m5a.xlarge", "m5a.2xlarge", "m5a.4xlarge", "m5a.8xlarge", "m5a.12xlarge", "m5a.16xlarge", "m5a.24xlarge", "c5d.large", "c5d.xlarge", "c5d.2xlarge", "c5d.4xlarge", "c5d.9xlarge", "c5d.12xlarge", "c5d.18xlarge", "c5d.24xlarge", "c6a.large", "c6a.xlarge", "c6a.2xlarge", "c6a.4xlarge", "c6a.8xlarge", "c6a.12xlarge", "c6a.16xlarge", "c6a.24xlarge", "c6i.large", "c6i.xlarge", "c6i.2xlarge", "c6i.4xlarge", "c6i.8xlarge", "c6i.12xlarge", "c6i.16xlarge", "c6i.24xlarge", "r5d.large", "r5d.xlarge", "r5d.2xlarge", "r5d.4xlarge", "r5d.8xlarge", "r5d.12xlarge", "r5d.16xlarge", "r5d.24xlarge", "m6g.medium", "m6g.large", "m6g.xlarge", "m6g.2xlarge", "m6g.4xlarge", "m6g.8xlarge", "m6g.12xlarge", "m6g.16xlarge", "c6g.medium", "c6g.large", "c6g.xlarge", "c6g.2xlarge", "c6g.4xlarge", "c6g.8xlarge", "c6g.12xlarge", "c6g.16xlarge", "r6g.medium", "r6g.large", "r6g.xlarge", "r6g.2xlarge", "r6g.4xlarge", "r6g.8xlarge", "r6g.12xlarge", "r6g.16xlarge", "c6gn.medium", "c6gn.large", "c6gn.xlarge", "c6gn.2xlarge", "c6gn.4xlarge", "c6gn.8xlarge", "c6gn.12xlarge", "c6gn.16xlarge", "c7g.medium", "c7g.large", "c7g.xlarge", "c7g.2xlarge", "c7g.4xlarge", "c7g.8xlarge", "c7g.12xlarge", "c7g.16xlarge", "r7g.medium", "r7g.large", "r7g.xlarge", "r7g.2xlarge", "r7g.4xlarge", "r7g.8xlarge", "r7g.12xlarge", "r7g.16xlarge", "m7g.medium", "m7g.large", "m7g.xlarge", "m7g.2xlarge", "m7g.4xlarge", "m7g.8xlarge", "m7g.12xlarge", "m7g.16xlarge", "g5g.xlarge", "g5g.2xlarge", "g5g.4xlarge", "g5g.8xlarge", "g5g.16xlarge"]
EventCode = Literal["GENERIC_EVENT", "FLEET_CREATED", "FLEET_DELETED", "FLEET_SCALING_EVENT", "FLEET_STATE_DOWNLOADING", "FLEET_STATE_VALIDATING", "FLEET_STATE_BUILDING", "FLEET_STATE_ACTIVATING", "FLEET_STATE_ACTIVE", "FLEET_STATE_ERROR", "FLEET_INITIALIZATION_FAILED", "FLEET_BINARY_DOWNLOAD_FAILED", "FLEET_VALIDATION_LAUNCH_PATH_NOT_FOUND", "FLEET_VALIDATION_EXECUTABLE_RUNTIME_FAILURE", "FLEET_VALIDATION_TIMED_OUT", "FLEET_ACTIVATION_FAILED", "FLEET_ACTIVATION_FAILED_NO_INSTANCES", "FLEET_NEW_GAME_SESSION_PROTECTION_POLICY_UPDATED", "SERVER_PROCESS_INVALID_PATH", "SERVER_PROCESS_SDK_INITIALIZATION_TIMEOUT", "SERVER_PROCESS_PROCESS_READY_TIMEOUT", "SERVER_PROCESS_CRASHED", "SERVER_PROCESS_TERMINATED_UNHEALTHY", "SERVER_PROCESS_FORCE_TERMINATED", "SERVER_PROCESS_PROCESS_EXIT_TIMEOUT", "GAME_SESSION_ACTIVATION_TIMEOUT", "FLEET_CREATION_EXTRACTING_BUILD", "FLEET_CREATION_RUNNING_INSTALLER", "FLEET_CREATION_VALIDATING_RUNTIME_CONFIG", "FLEET_VPC_PEERING_SUCCEEDED", "FLEET_VPC_PEERING_FAILED", "FLEET_VPC_PEERING_DELETED", "INSTANCE_INTERRUPTED", "INSTANCE_RECYCLED"]
FilterInstanceStatus = Literal["ACTIVE", "DRAINING"]
FleetAction = Literal["AUTO_SCALING"]
FleetStatus = Literal["NEW", "DOWNLOADING", "VALIDATING", "BUILDING", "ACTIVATING", "ACTIVE", "DELETING", "ERROR", "TERMINATED", "NOT_FOUND"]
FleetType = Literal["ON_DEMAND", "SPOT"]
FlexMatchMode = Literal["STANDALONE", "WITH_QUEUE"]
GameServerClaimStatus = Literal["CLAIMED"]
GameServerGroupAction = Literal["REPLACE_INSTANCE_TYPES"]
GameServerGroupDeleteOption = Literal["SAFE_DELETE", "FORCE_DELETE", "RETAIN"]
GameServerGroupInstanceType = Literal["c4.large", "c4.xlarge", "c4.2xlarge", "c4.4xlarge", "c4.8xlarge", "c5.large", "c5.xlarge", "c5.2xlarge", "c5.4xlarge", "c5.9xlarge", "c5.12xlarge", "c5.18xlarge", "c5.24xlarge", "c5a.large", "c5a.xlarge", "c5a.2xlarge", "c5a.4xlarge", "c5a.8xlarge", "c5a.12xlarge", "c5a.16xlarge", "c5a.24xlarge", "c6g.medium", "c6g.large", "c6g.xlarge", "c6g.2xlarge", "c6g.4xlarge", "c6g.8xlarge", "c6g.12xlarge", "c6g.16xlarge", "r4.large", "r4.xlarge", "r4.2xlarge", "r4.4xlarge", "r4.8xlarge", "r4.16xlarge", "r5.large", "r5.xlarge", "r5.2xlarge", "r5.4xlarge", "r5.8xlarge", "r5.12xlarge", "r5.16xlarge", "r5.24xlarge", "r5a.large", "r5a.xlarge", "r5a.2xlarge", "r5a.4xlarge", "r5a.8xlarge", "r5a.12xlarge", "r5a.16xlarge", "r5a.24xlarge", "r6g.medium", "r6g.large", "r6g.xlarge", "r6g.2xlarge", "r6g.4xlarge", "r6g.8xlarge", "r6g.12xlarge", "r6g.16xlarge", "m4.large", "m4.xlarge", "m4.2xlarge", "m4.4xlarge", "m4.10xlarge", "m5.large", "m5.xlarge", "m5.2xlarge", "m5.4xlarge", "m5.8xlarge", "m5.12xlarge", "m5.16xlarge", "m5.24xlarge", "m5a.large", "m5a.xlarge", "m5a.2xlarge", "m5a.4xlarge", "m5a.8xlarge", "m5a.12xlarge", "m5a.16xlarge", "m5a.24xlarge", "m6g.medium", "m6g.large", "m6g.xlarge", "m6g.2xlarge", "m6g.4xlarge", "m6g.8xlarge", "m6g.12xlarge", "m6g.16xlarge"]
GameServerGroupStatus = Literal["NEW", "ACTIVATING", "ACTIVE", "DELETE_SCHEDULED", "DELETING", "DELETED", "ERROR"]
GameServerHealthCheck = Literal["HEALTHY"]
GameServerInstanceStatus = Literal["ACTIVE", "DRAINING", "SPOT_TERMINATING"]
GameServerProtectionPolicy = Literal["NO_PROTECTION", "FULL_PROTECTION"]
GameServerUtilizationStatus = Literal["AVAILABLE", "UTILIZED"]
GameSessionPlacementState = Literal["PENDING", "FULFILLED", "CANCELLED", "TIMED_OUT", "FAILED"]
GameSessionStatus = Literal["ACTIVE", "ACTIVATING", "TERMINATED", "TERMINATING", "ERROR"]
GameSessionStatusReason = Literal["INTERRUPTED"]
InstanceRoleCredentialsProvider = Literal["SHARED_CREDENTIAL_FILE"]
InstanceStatus = Literal["PENDING", "ACTIVE", "TERMINATING"]
IpProtocol = Literal["TCP", "UDP"]
LocationFilter = Literal["AWS", "CUSTOM"]
LocationUpdateStatus = Literal["PENDING_UPDATE"]
MatchmakingConfigurationStatus = Literal["CANCELLED", "COMPLETED", "FAILED", "PLACING", "QUEUED", "REQUIRES_ACCEPTANCE", "SEARCHING", "TIMED_OUT"]
MetricName = Literal["ActivatingGameSessions", "ActiveGameSessions", "ActiveInstances", "AvailableGameSessions", "AvailablePlayerSessions", "CurrentPlayerSessions", "IdleInstances", "PercentAvailableGameSessions", "PercentIdleInstances", "QueueDepth", "WaitTime", "ConcurrentActivatableGameSessions"]
OperatingSystem = Literal["WINDOWS_2012", "AMAZON_LINUX", "AMAZON_LINUX_2", "WINDOWS_2016", "AMAZON_LINUX_2023"]
PlayerSessionCreationPolicy = Literal["ACCEPT_ALL", "DENY_ALL"]
PlayerSessionStatus = Literal["RESERVED", "ACTIVE", "COMPLETED", "TIMEDOUT"]
PolicyType = Literal["RuleBased", "TargetBased"]
PriorityType = Literal["LATENCY", "COST", "DESTINATION", "LOCATION"]
ProtectionPolicy = Literal["NoProtection", "FullProtection"]
RoutingStrategyType = Literal["SIMPLE", "TERMINAL"]
ScalingAdjustmentType = Literal["ChangeInCapacity", "ExactCapacity", "PercentChangeInCapacity"]
ScalingStatusType = Literal["ACTIVE", "UPDATE_REQUESTED", "UPDATING", "DELETE_REQUESTED", "DELETING", "DELETED", "ERROR"]
SortOrder = Literal["ASCENDING", "DESCENDING"]


class GameLiftErrors(str, Enum):
    CONFLICT = "ConflictException"
    FLEET_CAPACITY_EXCEEDED = "FleetCapacityExceededException"
    GAME_SESSION_FULL = "GameSessionFullException"
    IDEMPOTENT_PARAMETER_MISMATCH = "IdempotentParameterMismatchException"
    INTERNAL_SERVICE = "InternalServiceException"
    INVALID_FLEET_STATUS = "InvalidFleetStatusException"
    INVALID_GAME_SESSION_STATUS = "InvalidGameSessionStatusException"
    INVALID_REQUEST = "InvalidRequestException"
    LIMIT_EXCEEDED = "LimitExceededException"
    NOT_FOUND = "NotFoundException"
    NOT_READY = "NotReadyException"
    OUT_OF_CAPACITY = "OutOfCapacityException"
    TAGGING_FAILED = "TaggingFailedException"
    TERMINAL_ROUTING_STRATEGY = "TerminalRoutingStrategyException"
    UNAUTHORIZED = "UnauthorizedException"
    UNSUPPORTED_REGION = "UnsupportedRegionException"


RETRYABLE_ERRORS = frozenset()


class AcceptMatchInput(ServiceRequest, total=False):
    TicketId: Required[str]
    PlayerIds: Required[List[str]]
    AcceptanceType: Required[AcceptanceType]


class AcceptMatchOutput(TypedDict, total=False):
    pass


class ClaimFilterOption(TypedDict, total=False):
    InstanceStatuses: List[FilterInstanceStatus]


class ClaimGameServerInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    GameServerId: str
    GameServerData: str
    FilterOption: ClaimFilterOption


class GameServer(TypedDict, total=False):
    GameServerGroupName: str
    GameServerGroupArn: str
    GameServerId: str
    InstanceId: str
    ConnectionInfo: str
    GameServerData: str
    ClaimStatus: GameServerClaimStatus
    UtilizationStatus: GameServerUtilizationStatus
    RegistrationTime: datetime
    LastClaimTime: datetime
    LastHealthCheckTime: datetime


class ClaimGameServerOutput(TypedDict, total=False):
    GameServer: GameServer


class RoutingStrategy(TypedDict, total=False):
    Type: RoutingStrategyType
    FleetId: str
    Message: str


class Tag(TypedDict, total=False):
    Key: Required[str]
    Value: Required[str]


class CreateAliasInput(ServiceRequest, total=False):
    Name: Required[str]
    Description: str
    RoutingStrategy: Required[RoutingStrategy]
    Tags: List[Tag]


class Alias(TypedDict, total=False):
    AliasId: str
    Name: str
    AliasArn: str
    Description: str
    RoutingStrategy: RoutingStrategy
    CreationTime: datetime
    LastUpdatedTime: datetime


class CreateAliasOutput(TypedDict, total=False):
    Alias: Alias


class S3Location(TypedDict, total=False):
    Bucket: str
    Key: str
    RoleArn: str
    ObjectVersion: str


class CreateBuildInput(ServiceRequest, total=False):
    Name: str
    Version: str
    StorageLocation: S3Location
    OperatingSystem: OperatingSystem
    Tags: List[Tag]
    ServerSdkVersion: str


class Build(TypedDict, total=False):
    BuildId: str
    BuildArn: str
    Name: str
    Version: str
    Status: BuildStatus
    SizeOnDisk: int
    OperatingSystem: OperatingSystem
    CreationTime: datetime
    ServerSdkVersion: str


class AwsCredentials(TypedDict, total=False):
    AccessKeyId: str
    SecretAccessKey: str
    SessionToken: str


class CreateBuildOutput(TypedDict, total=False):
    Build: Build
    UploadCredentials: AwsCredentials
    StorageLocation: S3Location


class ContainerMemoryLimits(TypedDict, total=False):
    SoftLimit: int
    HardLimit: int


class ContainerPortRange(TypedDict, total=False):
    FromPort: Required[int]
    ToPort: Required[int]
    Protocol: Required[IpProtocol]


class ContainerPortConfiguration(TypedDict, total=False):
    ContainerPortRanges: Required[List[ContainerPortRange]]


class ContainerHealthCheck(TypedDict, total=False):
    Command: Required[List[str]]
    Interval: int
    Timeout: int
    Retries: int
    StartPeriod: int


class ContainerEnvironment(TypedDict, total=False):
    Name: Required[str]
    Value: Required[str]


class ContainerDependency(TypedDict, total=False):
    ContainerName: Required[str]
    Condition: Required[ContainerDependencyCondition]


class ContainerDefinitionInput(TypedDict, total=False):
    ContainerName: Required[str]
    ImageUri: Required[str]
    MemoryLimits: ContainerMemoryLimits
    PortConfiguration: ContainerPortConfiguration
    Cpu: int
    HealthCheck: ContainerHealthCheck
    Command: List[str]
    Essential: bool
    EntryPoint: List[str]
    WorkingDirectory: str
    Environment: List[ContainerEnvironment]
    DependsOn: List[ContainerDependency]


class CreateContainerGroupDefinitionInput(ServiceRequest, total=False):
    Name: Required[str]
    SchedulingStrategy: ContainerSchedulingStrategy
    TotalMemoryLimit: Required[int]
    TotalCpuLimit: Required[int]
    ContainerDefinitions: Required[List[ContainerDefinitionInput]]
    OperatingSystem: Required[ContainerOperatingSystem]
    Tags: List[Tag]


class ContainerDefinition(TypedDict, total=False):
    ContainerName: Required[str]
    ImageUri: Required[str]
    ResolvedImageDigest: str
    MemoryLimits: ContainerMemoryLimits
    PortConfiguration: ContainerPortConfiguration
    Cpu: int
    HealthCheck: ContainerHealthCheck
    Command: List[str]
    Essential: bool
    EntryPoint: List[str]
    WorkingDirectory: str
    Environment: List[ContainerEnvironment]
    DependsOn: List[ContainerDependency]


class ContainerGroupDefinition(TypedDict, total=False):
    ContainerGroupDefinitionArn: str
    CreationTime: datetime
    OperatingSystem: ContainerOperatingSystem
    Name: str
    SchedulingStrategy: ContainerSchedulingStrategy
    TotalMemoryLimit: int
    TotalCpuLimit: int
    ContainerDefinitions: List[ContainerDefinition]
    Status: ContainerGroupDefinitionStatus
    StatusReason: str


class CreateContainerGroupDefinitionOutput(TypedDict, total=False):
    ContainerGroupDefinition: ContainerGroupDefinition


class IpPermission(TypedDict, total=False):
    FromPort: Required[int]
    ToPort: Required[int]
    IpRange: Required[str]
    Protocol: Required[IpProtocol]


class ServerProcess(TypedDict, total=False):
    LaunchPath: Required[str]
    Parameters: str
    ConcurrentExecutions: Required[int]


class RuntimeConfiguration(TypedDict, total=False):
    ServerProcesses: List[ServerProcess]
    MaxConcurrentGameSessionActivations: int
    GameSessionActivationTimeoutSeconds: int


class ResourceCreationLimitPolicy(TypedDict, total=False):
    NewGameSessionsPerCreator: int
    PolicyPeriodInMinutes: int


class CertificateConfiguration(TypedDict, total=False):
    CertificateType: Required[CertificateType]


class LocationConfiguration(TypedDict, total=False):
    Location: Required[str]


class AnywhereConfiguration(TypedDict, total=False):
    Cost: Required[str]


class ConnectionPortRange(TypedDict, total=False):
    FromPort: Required[int]
    ToPort: Required[int]


class ContainerGroupsConfiguration(TypedDict, total=False):
    ContainerGroupDefinitionNames: Required[List[str]]
    ConnectionPortRange: Required[ConnectionPortRange]
    DesiredReplicaContainerGroupsPerInstance: int


class CreateFleetInput(ServiceRequest, total=False):
    Name: Required[str]
    Description: str
    BuildId: str
    ScriptId: str
    ServerLaunchPath: str
    ServerLaunchParameters: str
    LogPaths: List[str]
    EC2InstanceType: EC2InstanceType
    EC2InboundPermissions: List[IpPermission]
    NewGameSessionProtectionPolicy: ProtectionPolicy
    RuntimeConfiguration: RuntimeConfiguration
    ResourceCreationLimitPolicy: ResourceCreationLimitPolicy
    MetricGroups: List[str]
    PeerVpcAwsAccountId: str
    PeerVpcId: str
    FleetType: FleetType
    InstanceRoleArn: str
    CertificateConfiguration: CertificateConfiguration
    Locations: List[LocationConfiguration]
    Tags: List[Tag]
    ComputeType: ComputeType
    AnywhereConfiguration: AnywhereConfiguration
    InstanceRoleCredentialsProvider: InstanceRoleCredentialsProvider
    ContainerGroupsConfiguration: ContainerGroupsConfiguration


class ContainerGroupDefinitionProperty(TypedDict, total=False):
    SchedulingStrategy: ContainerSchedulingStrategy
    ContainerGroupDefinitionName: str


class ContainerGroupsPerInstance(TypedDict, total=False):
    DesiredReplicaContainerGroupsPerInstance: int
    MaxReplicaContainerGroupsPerInstance: int


class ContainerGroupsAttributes(TypedDict, total=False):
    ContainerGroupDefinitionProperties: List[ContainerGroupDefinitionProperty]
    ConnectionPortRange: ConnectionPortRange
    ContainerGroupsPerInstance: ContainerGroupsPerInstance


class FleetAttributes(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    FleetType: FleetType
    InstanceType: EC2InstanceType
    Description: str
    Name: str
    CreationTime: datetime
    TerminationTime: datetime
    Status: FleetStatus
    BuildId: str
    BuildArn: str
    ScriptId: str
    ScriptArn: str
    ServerLaunchPath: str
    ServerLaunchParameters: str
    LogPaths: List[str]
    NewGameSessionProtectionPolicy: ProtectionPolicy
    OperatingSystem: OperatingSystem
    ResourceCreationLimitPolicy: ResourceCreationLimitPolicy
    MetricGroups: List[str]
    StoppedActions: List[FleetAction]
    InstanceRoleArn: str
    CertificateConfiguration: CertificateConfiguration
    ComputeType: ComputeType
    AnywhereConfiguration: AnywhereConfiguration
    InstanceRoleCredentialsProvider: InstanceRoleCredentialsProvider
    ContainerGroupsAttributes: ContainerGroupsAttributes


class LocationState(TypedDict, total=False):
    Location: str
    Status: FleetStatus


class CreateFleetOutput(TypedDict, total=False):
    FleetAttributes: FleetAttributes
    LocationStates: List[LocationState]


class CreateFleetLocationsInput(ServiceRequest, total=False):
    FleetId: Required[str]
    Locations: Required[List[LocationConfiguration]]


class CreateFleetLocationsOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    LocationStates: List[LocationState]


class LaunchTemplateSpecification(TypedDict, total=False):
    LaunchTemplateId: str
    LaunchTemplateName: str
    Version: str


class InstanceDefinition(TypedDict, total=False):
    InstanceType: Required[GameServerGroupInstanceType]
    WeightedCapacity: str


class TargetTrackingConfiguration(TypedDict, total=False):
    TargetValue: Required[float]


class GameServerGroupAutoScalingPolicy(TypedDict, total=False):
    EstimatedInstanceWarmup: int
    TargetTrackingConfiguration: Required[TargetTrackingConfiguration]


class CreateGameServerGroupInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    RoleArn: Required[str]
    MinSize: Required[int]
    MaxSize: Required[int]
    LaunchTemplate: Required[LaunchTemplateSpecification]
    InstanceDefinitions: Required[List[InstanceDefinition]]
    AutoScalingPolicy: GameServerGroupAutoScalingPolicy
    BalancingStrategy: BalancingStrategy
    GameServerProtectionPolicy: GameServerProtectionPolicy
    VpcSubnets: List[str]
    Tags: List[Tag]


class GameServerGroup(TypedDict, total=False):
    GameServerGroupName: str
    GameServerGroupArn: str
    RoleArn: str
    InstanceDefinitions: List[InstanceDefinition]
    BalancingStrategy: BalancingStrategy
    GameServerProtectionPolicy: GameServerProtectionPolicy
    AutoScalingGroupArn: str
    Status: GameServerGroupStatus
    StatusReason: str
    SuspendedActions: List[GameServerGroupAction]
    CreationTime: datetime
    LastUpdatedTime: datetime


class CreateGameServerGroupOutput(TypedDict, total=False):
    GameServerGroup: GameServerGroup


class GameProperty(TypedDict, total=False):
    Key: Required[str]
    Value: Required[str]


class CreateGameSessionInput(ServiceRequest, total=False):
    FleetId: str
    AliasId: str
    MaximumPlayerSessionCount: Required[int]
    Name: str
    GameProperties: List[GameProperty]
    CreatorId: str
    GameSessionId: str
    IdempotencyToken: str
    GameSessionData: str
    Location: str


class GameSession(TypedDict, total=False):
    GameSessionId: str
    Name: str
    FleetId: str
    FleetArn: str
    CreationTime: datetime
    TerminationTime: datetime
    CurrentPlayerSessionCount: int
    MaximumPlayerSessionCount: int
    Status: GameSessionStatus
    StatusReason: GameSessionStatusReason
    GameProperties: List[GameProperty]
    IpAddress: str
    DnsName: str
    Port: int
    PlayerSessionCreationPolicy: PlayerSessionCreationPolicy
    CreatorId: str
    GameSessionData: str
    MatchmakerData: str
    Location: str


class CreateGameSessionOutput(TypedDict, total=False):
    GameSession: GameSession


class PlayerLatencyPolicy(TypedDict, total=False):
    MaximumIndividualPlayerLatencyMilliseconds: int
    PolicyDurationSeconds: int


class GameSessionQueueDestination(TypedDict, total=False):
    DestinationArn: str


class FilterConfiguration(TypedDict, total=False):
    AllowedLocations: List[str]


class PriorityConfiguration(TypedDict, total=False):
    PriorityOrder: List[PriorityType]
    LocationOrder: List[str]


class CreateGameSessionQueueInput(ServiceRequest, total=False):
    Name: Required[str]
    TimeoutInSeconds: int
    PlayerLatencyPolicies: List[PlayerLatencyPolicy]
    Destinations: List[GameSessionQueueDestination]
    FilterConfiguration: FilterConfiguration
    PriorityConfiguration: PriorityConfiguration
    CustomEventData: str
    NotificationTarget: str
    Tags: List[Tag]


class GameSessionQueue(TypedDict, total=False):
    Name: str
    GameSessionQueueArn: str
    TimeoutInSeconds: int
    PlayerLatencyPolicies: List[PlayerLatencyPolicy]
    Destinations: List[GameSessionQueueDestination]
    FilterConfiguration: FilterConfiguration
    PriorityConfiguration: PriorityConfiguration
    CustomEventData: str
    NotificationTarget: str


class CreateGameSessionQueueOutput(TypedDict, total=False):
    GameSessionQueue: GameSessionQueue


class CreateLocationInput(ServiceRequest, total=False):
    LocationName: Required[str]
    Tags: List[Tag]


class LocationModel(TypedDict, total=False):
    LocationName: str
    LocationArn: str


class CreateLocationOutput(TypedDict, total=False):
    Location: LocationModel


class CreateMatchmakingConfigurationInput(ServiceRequest, total=False):
    Name: Required[str]
    Description: str
    GameSessionQueueArns: List[str]
    RequestTimeoutSeconds: Required[int]
    AcceptanceTimeoutSeconds: int
    AcceptanceRequired: Required[bool]
    RuleSetName: Required[str]
    NotificationTarget: str
    AdditionalPlayerCount: int
    CustomEventData: str
    GameProperties: List[GameProperty]
    GameSessionData: str
    BackfillMode: BackfillMode
    FlexMatchMode: FlexMatchMode
    Tags: List[Tag]


class MatchmakingConfiguration(TypedDict, total=False):
    Name: str
    ConfigurationArn: str
    Description: str
    GameSessionQueueArns: List[str]
    RequestTimeoutSeconds: int
    AcceptanceTimeoutSeconds: int
    AcceptanceRequired: bool
    RuleSetName: str
    RuleSetArn: str
    NotificationTarget: str
    AdditionalPlayerCount: int
    CustomEventData: str
    CreationTime: datetime
    GameProperties: List[GameProperty]
    GameSessionData: str
    BackfillMode: BackfillMode
    FlexMatchMode: FlexMatchMode


class CreateMatchmakingConfigurationOutput(TypedDict, total=False):
    Configuration: MatchmakingConfiguration


class CreateMatchmakingRuleSetInput(ServiceRequest, total=False):
    Name: Required[str]
    RuleSetBody: Required[str]
    Tags: List[Tag]


class MatchmakingRuleSet(TypedDict, total=False):
    RuleSetName: str
    RuleSetArn: str
    RuleSetBody: Required[str]
    CreationTime: datetime


class CreateMatchmakingRuleSetOutput(TypedDict, total=False):
    RuleSet: Required[MatchmakingRuleSet]


class CreatePlayerSessionInput(ServiceRequest, total=False):
    GameSessionId: Required[str]
    PlayerId: Required[str]
    PlayerData: str


class PlayerSession(TypedDict, total=False):
    PlayerSessionId: str
    PlayerId: str
    GameSessionId: str
    FleetId: str
    FleetArn: str
    CreationTime: datetime
    TerminationTime: datetime
    Status: PlayerSessionStatus
    IpAddress: str
    DnsName: str
    Port: int
    PlayerData: str


class CreatePlayerSessionOutput(TypedDict, total=False):
    PlayerSession: PlayerSession


class CreatePlayerSessionsInput(ServiceRequest, total=False):
    GameSessionId: Required[str]
    PlayerIds: Required[List[str]]
    PlayerDataMap: Dict[str, str]


class CreatePlayerSessionsOutput(TypedDict, total=False):
    PlayerSessions: List[PlayerSession]


class CreateScriptInput(ServiceRequest, total=False):
    Name: str
    Version: str
    StorageLocation: S3Location
    ZipFile: bytes
    Tags: List[Tag]


class Script(TypedDict, total=False):
    ScriptId: str
    ScriptArn: str
    Name: str
    Version: str
    SizeOnDisk: int
    CreationTime: datetime
    StorageLocation: S3Location


class CreateScriptOutput(TypedDict, total=False):
    Script: Script


class CreateVpcPeeringAuthorizationInput(ServiceRequest, total=False):
    GameLiftAwsAccountId: Required[str]
    PeerVpcId: Required[str]


class VpcPeeringAuthorization(TypedDict, total=False):
    GameLiftAwsAccountId: str
    PeerVpcAwsAccountId: str
    PeerVpcId: str
    CreationTime: datetime
    ExpirationTime: datetime


class CreateVpcPeeringAuthorizationOutput(TypedDict, total=False):
    VpcPeeringAuthorization: VpcPeeringAuthorization


class CreateVpcPeeringConnectionInput(ServiceRequest, total=False):
    FleetId: Required[str]
    PeerVpcAwsAccountId: Required[str]
    PeerVpcId: Required[str]


class CreateVpcPeeringConnectionOutput(TypedDict, total=False):
    pass


class DeleteAliasInput(ServiceRequest, total=False):
    AliasId: Required[str]


class DeleteBuildInput(ServiceRequest, total=False):
    BuildId: Required[str]


class DeleteContainerGroupDefinitionInput(ServiceRequest, total=False):
    Name: Required[str]


class DeleteFleetInput(ServiceRequest, total=False):
    FleetId: Required[str]


class DeleteFleetLocationsInput(ServiceRequest, total=False):
    FleetId: Required[str]
    Locations: Required[List[str]]


class DeleteFleetLocationsOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    LocationStates: List[LocationState]


class DeleteGameServerGroupInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    DeleteOption: GameServerGroupDeleteOption


class DeleteGameServerGroupOutput(TypedDict, total=False):
    GameServerGroup: GameServerGroup


class DeleteGameSessionQueueInput(ServiceRequest, total=False):
    Name: Required[str]


class DeleteGameSessionQueueOutput(TypedDict, total=False):
    pass


class DeleteLocationInput(ServiceRequest, total=False):
    LocationName: Required[str]


class DeleteLocationOutput(TypedDict, total=False):
    pass


class DeleteMatchmakingConfigurationInput(ServiceRequest, total=False):
    Name: Required[str]


class DeleteMatchmakingConfigurationOutput(TypedDict, total=False):
    pass


class DeleteMatchmakingRuleSetInput(ServiceRequest, total=False):
    Name: Required[str]


class DeleteMatchmakingRuleSetOutput(TypedDict, total=False):
    pass


class DeleteScalingPolicyInput(ServiceRequest, total=False):
    Name: Required[str]
    FleetId: Required[str]


class DeleteScriptInput(ServiceRequest, total=False):
    ScriptId: Required[str]


class DeleteVpcPeeringAuthorizationInput(ServiceRequest, total=False):
    GameLiftAwsAccountId: Required[str]
    PeerVpcId: Required[str]


class DeleteVpcPeeringAuthorizationOutput(TypedDict, total=False):
    pass


class DeleteVpcPeeringConnectionInput(ServiceRequest, total=False):
    FleetId: Required[str]
    VpcPeeringConnectionId: Required[str]


class DeleteVpcPeeringConnectionOutput(TypedDict, total=False):
    pass


class DeregisterComputeInput(ServiceRequest, total=False):
    FleetId: Required[str]
    ComputeName: Required[str]


class DeregisterComputeOutput(TypedDict, total=False):
    pass


class DeregisterGameServerInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    GameServerId: Required[str]


class DescribeAliasInput(ServiceRequest, total=False):
    AliasId: Required[str]


class DescribeAliasOutput(TypedDict, total=False):
    Alias: Alias


class DescribeBuildInput(ServiceRequest, total=False):
    BuildId: Required[str]


class DescribeBuildOutput(TypedDict, total=False):
    Build: Build


class DescribeComputeInput(ServiceRequest, total=False):
    FleetId: Required[str]
    ComputeName: Required[str]


class ContainerPortMapping(TypedDict, total=False):
    ContainerPort: int
    ConnectionPort: int
    Protocol: IpProtocol


class ContainerAttributes(TypedDict, total=False):
    ContainerPortMappings: List[ContainerPortMapping]


class Compute(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    ComputeName: str
    ComputeArn: str
    IpAddress: str
    DnsName: str
    ComputeStatus: ComputeStatus
    Location: str
    CreationTime: datetime
    OperatingSystem: OperatingSystem
    Type: EC2InstanceType
    GameLiftServiceSdkEndpoint: str
    GameLiftAgentEndpoint: str
    InstanceId: str
    ContainerAttributes: ContainerAttributes


class DescribeComputeOutput(TypedDict, total=False):
    Compute: Compute


class DescribeContainerGroupDefinitionInput(ServiceRequest, total=False):
    Name: Required[str]


class DescribeContainerGroupDefinitionOutput(TypedDict, total=False):
    ContainerGroupDefinition: ContainerGroupDefinition


class DescribeEC2InstanceLimitsInput(ServiceRequest, total=False):
    EC2InstanceType: EC2InstanceType
    Location: str


class EC2InstanceLimit(TypedDict, total=False):
    EC2InstanceType: EC2InstanceType
    CurrentInstances: int
    InstanceLimit: int
    Location: str


class DescribeEC2InstanceLimitsOutput(TypedDict, total=False):
    EC2InstanceLimits: List[EC2InstanceLimit]


class DescribeFleetAttributesInput(ServiceRequest, total=False):
    FleetIds: List[str]
    Limit: int
    NextToken: str


class DescribeFleetAttributesOutput(TypedDict, total=False):
    FleetAttributes: List[FleetAttributes]
    NextToken: str


class DescribeFleetCapacityInput(ServiceRequest, total=False):
    FleetIds: List[str]
    Limit: int
    NextToken: str


class EC2InstanceCounts(TypedDict, total=False):
    DESIRED: int
    MINIMUM: int
    MAXIMUM: int
    PENDING: int
    ACTIVE: int
    IDLE: int
    TERMINATING: int


class ReplicaContainerGroupCounts(TypedDict, total=False):
    PENDING: int
    ACTIVE: int
    IDLE: int
    TERMINATING: int


class FleetCapacity(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    InstanceType: EC2InstanceType
    InstanceCounts: EC2InstanceCounts
    Location: str
    ReplicaContainerGroupCounts: ReplicaContainerGroupCounts


class DescribeFleetCapacityOutput(TypedDict, total=False):
    FleetCapacity: List[FleetCapacity]
    NextToken: str


class DescribeFleetEventsInput(ServiceRequest, total=False):
    FleetId: Required[str]
    StartTime: datetime
    EndTime: datetime
    Limit: int
    NextToken: str


class Event(TypedDict, total=False):
    EventId: str
    ResourceId: str
    EventCode: EventCode
    Message: str
    EventTime: datetime
    PreSignedLogUrl: str
    Count: int


class DescribeFleetEventsOutput(TypedDict, total=False):
    Events: List[Event]
    NextToken: str


class DescribeFleetLocationAttributesInput(ServiceRequest, total=False):
    FleetId: Required[str]
    Locations: List[str]
    Limit: int
    NextToken: str


class LocationAttributes(TypedDict, total=False):
    LocationState: LocationState
    StoppedActions: List[FleetAction]
    UpdateStatus: LocationUpdateStatus


class DescribeFleetLocationAttributesOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    LocationAttributes: List[LocationAttributes]
    NextToken: str


class DescribeFleetLocationCapacityInput(ServiceRequest, total=False):
    FleetId: Required[str]
    Location: Required[str]


class DescribeFleetLocationCapacityOutput(TypedDict, total=False):
    FleetCapacity: FleetCapacity


class DescribeFleetLocationUtilizationInput(ServiceRequest, total=False):
    FleetId: Required[str]
    Location: Required[str]


class FleetUtilization(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    ActiveServerProcessCount: int
    ActiveGameSessionCount: int
    CurrentPlayerSessionCount: int
    MaximumPlayerSessionCount: int
    Location: str


class DescribeFleetLocationUtilizationOutput(TypedDict, total=False):
    FleetUtilization: FleetUtilization


class DescribeFleetPortSettingsInput(ServiceRequest, total=False):
    FleetId: Required[str]
    Location: str


class DescribeFleetPortSettingsOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    InboundPermissions: List[IpPermission]
    UpdateStatus: LocationUpdateStatus
    Location: str


class DescribeFleetUtilizationInput(ServiceRequest, total=False):
    FleetIds: List[str]
    Limit: int
    NextToken: str


class DescribeFleetUtilizationOutput(TypedDict, total=False):
    FleetUtilization: List[FleetUtilization]
    NextToken: str


class DescribeGameServerInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    GameServerId: Required[str]


class DescribeGameServerOutput(TypedDict, total=False):
    GameServer: GameServer


class DescribeGameServerGroupInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]


class DescribeGameServerGroupOutput(TypedDict, total=False):
    GameServerGroup: GameServerGroup


class DescribeGameServerInstancesInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    InstanceIds: List[str]
    Limit: int
    NextToken: str


class GameServerInstance(TypedDict, total=False):
    GameServerGroupName: str
    GameServerGroupArn: str
    InstanceId: str
    InstanceStatus: GameServerInstanceStatus


class DescribeGameServerInstancesOutput(TypedDict, total=False):
    GameServerInstances: List[GameServerInstance]
    NextToken: str


class DescribeGameSessionDetailsInput(ServiceRequest, total=False):
    FleetId: str
    GameSessionId: str
    AliasId: str
    Location: str
    StatusFilter: str
    Limit: int
    NextToken: str


class GameSessionDetail(TypedDict, total=False):
    GameSession: GameSession
    ProtectionPolicy: ProtectionPolicy


class DescribeGameSessionDetailsOutput(TypedDict, total=False):
    GameSessionDetails: List[GameSessionDetail]
    NextToken: str


class DescribeGameSessionPlacementInput(ServiceRequest, total=False):
    PlacementId: Required[str]


class PlayerLatency(TypedDict, total=False):
    PlayerId: str
    RegionIdentifier: str
    LatencyInMilliseconds: float


class PlacedPlayerSession(TypedDict, total=False):
    PlayerId: str
    PlayerSessionId: str


class GameSessionPlacement(TypedDict, total=False):
    PlacementId: str
    GameSessionQueueName: str
    Status: GameSessionPlacementState
    GameProperties: List[GameProperty]
    MaximumPlayerSessionCount: int
    GameSessionName: str
    GameSessionId: str
    GameSessionArn: str
    GameSessionRegion: str
    PlayerLatencies: List[PlayerLatency]
    StartTime: datetime
    EndTime: datetime
    IpAddress: str
    DnsName: str
    Port: int
    PlacedPlayerSessions: List[PlacedPlayerSession]
    GameSessionData: str
    MatchmakerData: str


class DescribeGameSessionPlacementOutput(TypedDict, total=False):
    GameSessionPlacement: GameSessionPlacement


class DescribeGameSessionQueuesInput(ServiceRequest, total=False):
    Names: List[str]
    Limit: int
    NextToken: str


class DescribeGameSessionQueuesOutput(TypedDict, total=False):
    GameSessionQueues: List[GameSessionQueue]
    NextToken: str


class DescribeGameSessionsInput(ServiceRequest, total=False):
    FleetId: str
    GameSessionId: str
    AliasId: str
    Location: str
    StatusFilter: str
    Limit: int
    NextToken: str


class DescribeGameSessionsOutput(TypedDict, total=False):
    GameSessions: List[GameSession]
    NextToken: str


class DescribeInstancesInput(ServiceRequest, total=False):
    FleetId: Required[str]
    InstanceId: str
    Limit: int
    NextToken: str
    Location: str


class Instance(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    InstanceId: str
    IpAddress: str
    DnsName: str
    OperatingSystem: OperatingSystem
    Type: EC2InstanceType
    Status: InstanceStatus
    CreationTime: datetime
    Location: str


class DescribeInstancesOutput(TypedDict, total=False):
    Instances: List[Instance]
    NextToken: str


class DescribeMatchmakingInput(ServiceRequest, total=False):
    TicketIds: Required[List[str]]


class AttributeValue(TypedDict, total=False):
    S: str
    N: float
    SL: List[str]
    SDM: Dict[str, float]


class Player(TypedDict, total=False):
    PlayerId: str
    PlayerAttributes: Dict[str, AttributeValue]
    Team: str
    LatencyInMs: Dict[str, int]


class MatchedPlayerSession(TypedDict, total=False):
    PlayerId: str
    PlayerSessionId: str


class GameSessionConnectionInfo(TypedDict, total=False):
    GameSessionArn: str
    IpAddress: str
    DnsName: str
    Port: int
    MatchedPlayerSessions: List[MatchedPlayerSession]


class MatchmakingTicket(TypedDict, total=False):
    TicketId: str
    ConfigurationName: str
    ConfigurationArn: str
    Status: MatchmakingConfigurationStatus
    StatusReason: str
    StatusMessage: str
    StartTime: datetime
    EndTime: datetime
    Players: List[Player]
    GameSessionConnectionInfo: GameSessionConnectionInfo
    EstimatedWaitTime: int


class DescribeMatchmakingOutput(TypedDict, total=False):
    TicketList: List[MatchmakingTicket]


class DescribeMatchmakingConfigurationsInput(ServiceRequest, total=False):
    Names: List[str]
    RuleSetName: str
    Limit: int
    NextToken: str


class DescribeMatchmakingConfigurationsOutput(TypedDict, total=False):
    Configurations: List[MatchmakingConfiguration]
    NextToken: str


class DescribeMatchmakingRuleSetsInput(ServiceRequest, total=False):
    Names: List[str]
    Limit: int
    NextToken: str


class DescribeMatchmakingRuleSetsOutput(TypedDict, total=False):
    RuleSets: Required[List[MatchmakingRuleSet]]
    NextToken: str


class DescribePlayerSessionsInput(ServiceRequest, total=False):
    GameSessionId: str
    PlayerId: str
    PlayerSessionId: str
    PlayerSessionStatusFilter: str
    Limit: int
    NextToken: str


class DescribePlayerSessionsOutput(TypedDict, total=False):
    PlayerSessions: List[PlayerSession]
    NextToken: str


class DescribeRuntimeConfigurationInput(ServiceRequest, total=False):
    FleetId: Required[str]


class DescribeRuntimeConfigurationOutput(TypedDict, total=False):
    RuntimeConfiguration: RuntimeConfiguration


class DescribeScalingPoliciesInput(ServiceRequest, total=False):
    FleetId: Required[str]
    StatusFilter: ScalingStatusType
    Limit: int
    NextToken: str
    Location: str


class TargetConfiguration(TypedDict, total=False):
    TargetValue: Required[float]


class ScalingPolicy(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    Name: str
    Status: ScalingStatusType
    ScalingAdjustment: int
    ScalingAdjustmentType: ScalingAdjustmentType
    ComparisonOperator: ComparisonOperatorType
    Threshold: float
    EvaluationPeriods: int
    MetricName: MetricName
    PolicyType: PolicyType
    TargetConfiguration: TargetConfiguration
    UpdateStatus: LocationUpdateStatus
    Location: str


class DescribeScalingPoliciesOutput(TypedDict, total=False):
    ScalingPolicies: List[ScalingPolicy]
    NextToken: str


class DescribeScriptInput(ServiceRequest, total=False):
    ScriptId: Required[str]


class DescribeScriptOutput(TypedDict, total=False):
    Script: Script


class DescribeVpcPeeringAuthorizationsInput(ServiceRequest, total=False):
    pass


class DescribeVpcPeeringAuthorizationsOutput(TypedDict, total=False):
    VpcPeeringAuthorizations: List[VpcPeeringAuthorization]


class DescribeVpcPeeringConnectionsInput(ServiceRequest, total=False):
    FleetId: str


class VpcPeeringConnectionStatus(TypedDict, total=False):
    Code: str
    Message: str


class VpcPeeringConnection(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    IpV4CidrBlock: str
    VpcPeeringConnectionId: str
    Status: VpcPeeringConnectionStatus
    PeerVpcId: str
    GameLiftVpcId: str


class DescribeVpcPeeringConnectionsOutput(TypedDict, total=False):
    VpcPeeringConnections: List[VpcPeeringConnection]


class GetComputeAccessInput(ServiceRequest, total=False):
    FleetId: Required[str]
    ComputeName: Required[str]


class GetComputeAccessOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    ComputeName: str
    ComputeArn: str
    Credentials: AwsCredentials
    Target: str


class GetComputeAuthTokenInput(ServiceRequest, total=False):
    FleetId: Required[str]
    ComputeName: Required[str]


class GetComputeAuthTokenOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    ComputeName: str
    ComputeArn: str
    AuthToken: str
    ExpirationTimestamp: datetime


class GetGameSessionLogUrlInput(ServiceRequest, total=False):
    GameSessionId: Required[str]


class GetGameSessionLogUrlOutput(TypedDict, total=False):
    PreSignedUrl: str


class GetInstanceAccessInput(ServiceRequest, total=False):
    FleetId: Required[str]
    InstanceId: Required[str]


class InstanceCredentials(TypedDict, total=False):
    UserName: str
    Secret: str


class InstanceAccess(TypedDict, total=False):
    FleetId: str
    InstanceId: str
    IpAddress: str
    OperatingSystem: OperatingSystem
    Credentials: InstanceCredentials


class GetInstanceAccessOutput(TypedDict, total=False):
    InstanceAccess: InstanceAccess


class ListAliasesInput(ServiceRequest, total=False):
    RoutingStrategyType: RoutingStrategyType
    Name: str
    Limit: int
    NextToken: str


class ListAliasesOutput(TypedDict, total=False):
    Aliases: List[Alias]
    NextToken: str


class ListBuildsInput(ServiceRequest, total=False):
    Status: BuildStatus
    Limit: int
    NextToken: str


class ListBuildsOutput(TypedDict, total=False):
    Builds: List[Build]
    NextToken: str


class ListComputeInput(ServiceRequest, total=False):
    FleetId: Required[str]
    Location: str
    Limit: int
    NextToken: str


class ListComputeOutput(TypedDict, total=False):
    ComputeList: List[Compute]
    NextToken: str


class ListContainerGroupDefinitionsInput(ServiceRequest, total=False):
    SchedulingStrategy: ContainerSchedulingStrategy
    Limit: int
    NextToken: str


class ListContainerGroupDefinitionsOutput(TypedDict, total=False):
    ContainerGroupDefinitions: List[ContainerGroupDefinition]
    NextToken: str


class ListFleetsInput(ServiceRequest, total=False):
    BuildId: str
    ScriptId: str
    ContainerGroupDefinitionName: str
    Limit: int
    NextToken: str


class ListFleetsOutput(TypedDict, total=False):
    FleetIds: List[str]
    NextToken: str


class ListGameServerGroupsInput(ServiceRequest, total=False):
    Limit: int
    NextToken: str


class ListGameServerGroupsOutput(TypedDict, total=False):
    GameServerGroups: List[GameServerGroup]
    NextToken: str


class ListGameServersInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    SortOrder: SortOrder
    Limit: int
    NextToken: str


class ListGameServersOutput(TypedDict, total=False):
    GameServers: List[GameServer]
    NextToken: str


class ListLocationsInput(ServiceRequest, total=False):
    Filters: List[LocationFilter]
    Limit: int
    NextToken: str


class ListLocationsOutput(TypedDict, total=False):
    Locations: List[LocationModel]
    NextToken: str


class ListScriptsInput(ServiceRequest, total=False):
    Limit: int
    NextToken: str


class ListScriptsOutput(TypedDict, total=False):
    Scripts: List[Script]
    NextToken: str


class ListTagsForResourceRequest(ServiceRequest, total=False):
    ResourceARN: Required[str]


class ListTagsForResourceResponse(TypedDict, total=False):
    Tags: List[Tag]


class PutScalingPolicyInput(ServiceRequest, total=False):
    Name: Required[str]
    FleetId: Required[str]
    ScalingAdjustment: int
    ScalingAdjustmentType: ScalingAdjustmentType
    Threshold: float
    ComparisonOperator: ComparisonOperatorType
    EvaluationPeriods: int
    MetricName: Required[MetricName]
    PolicyType: PolicyType
    TargetConfiguration: TargetConfiguration


class PutScalingPolicyOutput(TypedDict, total=False):
    Name: str


class RegisterComputeInput(ServiceRequest, total=False):
    FleetId: Required[str]
    ComputeName: Required[str]
    CertificatePath: str
    DnsName: str
    IpAddress: str
    Location: str


class RegisterComputeOutput(TypedDict, total=False):
    Compute: Compute


class RegisterGameServerInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    GameServerId: Required[str]
    InstanceId: Required[str]
    ConnectionInfo: str
    GameServerData: str


class RegisterGameServerOutput(TypedDict, total=False):
    GameServer: GameServer


class RequestUploadCredentialsInput(ServiceRequest, total=False):
    BuildId: Required[str]


class RequestUploadCredentialsOutput(TypedDict, total=False):
    UploadCredentials: AwsCredentials
    StorageLocation: S3Location


class ResolveAliasInput(ServiceRequest, total=False):
    AliasId: Required[str]


class ResolveAliasOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str


class ResumeGameServerGroupInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    ResumeActions: Required[List[GameServerGroupAction]]


class ResumeGameServerGroupOutput(TypedDict, total=False):
    GameServerGroup: GameServerGroup


class SearchGameSessionsInput(ServiceRequest, total=False):
    FleetId: str
    AliasId: str
    Location: str
    FilterExpression: str
    SortExpression: str
    Limit: int
    NextToken: str


class SearchGameSessionsOutput(TypedDict, total=False):
    GameSessions: List[GameSession]
    NextToken: str


class StartFleetActionsInput(ServiceRequest, total=False):
    FleetId: Required[str]
    Actions: Required[List[FleetAction]]
    Location: str


class StartFleetActionsOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str


class DesiredPlayerSession(TypedDict, total=False):
    PlayerId: str
    PlayerData: str


class StartGameSessionPlacementInput(ServiceRequest, total=False):
    PlacementId: Required[str]
    GameSessionQueueName: Required[str]
    GameProperties: List[GameProperty]
    MaximumPlayerSessionCount: Required[int]
    GameSessionName: str
    PlayerLatencies: List[PlayerLatency]
    DesiredPlayerSessions: List[DesiredPlayerSession]
    GameSessionData: str


class StartGameSessionPlacementOutput(TypedDict, total=False):
    GameSessionPlacement: GameSessionPlacement


class StartMatchBackfillInput(ServiceRequest, total=False):
    TicketId: str
    ConfigurationName: Required[str]
    GameSessionArn: str
    Players: Required[List[Player]]


class StartMatchBackfillOutput(TypedDict, total=False):
    MatchmakingTicket: MatchmakingTicket


class StartMatchmakingInput(ServiceRequest, total=False):
    TicketId: str
    ConfigurationName: Required[str]
    Players: Required[List[Player]]


class StartMatchmakingOutput(TypedDict, total=False):
    MatchmakingTicket: MatchmakingTicket


class StopFleetActionsInput(ServiceRequest, total=False):
    FleetId: Required[str]
    Actions: Required[List[FleetAction]]
    Location: str


class StopFleetActionsOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str


class StopGameSessionPlacementInput(ServiceRequest, total=False):
    PlacementId: Required[str]


class StopGameSessionPlacementOutput(TypedDict, total=False):
    GameSessionPlacement: GameSessionPlacement


class StopMatchmakingInput(ServiceRequest, total=False):
    TicketId: Required[str]


class StopMatchmakingOutput(TypedDict, total=False):
    pass


class SuspendGameServerGroupInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    SuspendActions: Required[List[GameServerGroupAction]]


class SuspendGameServerGroupOutput(TypedDict, total=False):
    GameServerGroup: GameServerGroup


class TagResourceRequest(ServiceRequest, total=False):
    ResourceARN: Required[str]
    Tags: Required[List[Tag]]


class TagResourceResponse(TypedDict, total=False):
    pass


class UntagResourceRequest(ServiceRequest, total=False):
    ResourceARN: Required[str]
    TagKeys: Required[List[str]]


class UntagResourceResponse(TypedDict, total=False):
    pass


class UpdateAliasInput(ServiceRequest, total=False):
    AliasId: Required[str]
    Name: str
    Description: str
    RoutingStrategy: RoutingStrategy


class UpdateAliasOutput(TypedDict, total=False):
    Alias: Alias


class UpdateBuildInput(ServiceRequest, total=False):
    BuildId: Required[str]
    Name: str
    Version: str


class UpdateBuildOutput(TypedDict, total=False):
    Build: Build


class UpdateFleetAttributesInput(ServiceRequest, total=False):
    FleetId: Required[str]
    Name: str
    Description: str
    NewGameSessionProtectionPolicy: ProtectionPolicy
    ResourceCreationLimitPolicy: ResourceCreationLimitPolicy
    MetricGroups: List[str]
    AnywhereConfiguration: AnywhereConfiguration


class UpdateFleetAttributesOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str


class UpdateFleetCapacityInput(ServiceRequest, total=False):
    FleetId: Required[str]
    DesiredInstances: int
    MinSize: int
    MaxSize: int
    Location: str


class UpdateFleetCapacityOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str
    Location: str


class UpdateFleetPortSettingsInput(ServiceRequest, total=False):
    FleetId: Required[str]
    InboundPermissionAuthorizations: List[IpPermission]
    InboundPermissionRevocations: List[IpPermission]


class UpdateFleetPortSettingsOutput(TypedDict, total=False):
    FleetId: str
    FleetArn: str


class UpdateGameServerInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    GameServerId: Required[str]
    GameServerData: str
    UtilizationStatus: GameServerUtilizationStatus
    HealthCheck: GameServerHealthCheck


class UpdateGameServerOutput(TypedDict, total=False):
    GameServer: GameServer


class UpdateGameServerGroupInput(ServiceRequest, total=False):
    GameServerGroupName: Required[str]
    RoleArn: str
    InstanceDefinitions: List[InstanceDefinition]
    GameServerProtectionPolicy: GameServerProtectionPolicy
    BalancingStrategy: BalancingStrategy


class UpdateGameServerGroupOutput(TypedDict, total=False):
    GameServerGroup: GameServerGroup


class UpdateGameSessionInput(ServiceRequest, total=False):
    GameSessionId: Required[str]
    MaximumPlayerSessionCount: int
    Name: str
    PlayerSessionCreationPolicy: PlayerSessionCreationPolicy
    ProtectionPolicy: ProtectionPolicy
    GameProperties: List[GameProperty]


class UpdateGameSessionOutput(TypedDict, total=False):
    GameSession: GameSession


class UpdateGameSessionQueueInput(ServiceRequest, total=False):
    Name: Required[str]
    TimeoutInSeconds: int
    PlayerLatencyPolicies: List[PlayerLatencyPolicy]
    Destinations: List[GameSessionQueueDestination]
    FilterConfiguration: FilterConfiguration
    PriorityConfiguration: PriorityConfiguration
    CustomEventData: str
    NotificationTarget: str


class UpdateGameSessionQueueOutput(TypedDict, total=False):
    GameSessionQueue: GameSessionQueue


class UpdateMatchmakingConfigurationInput(ServiceRequest, total=False):
    Name: Required[str]
    Description: str
    GameSessionQueueArns: List[str]
    RequestTimeoutSeconds: int
    AcceptanceTimeoutSeconds: int
    AcceptanceRequired: bool
    RuleSetName: str
    NotificationTarget: str
    AdditionalPlayerCount: int
    CustomEventData: str
    GameProperties: List[GameProperty]
    GameSessionData: str
    BackfillMode: BackfillMode
    FlexMatchMode: FlexMatchMode


class UpdateMatchmakingConfigurationOutput(TypedDict, total=False):
    Configuration: MatchmakingConfiguration


class UpdateRuntimeConfigurationInput(ServiceRequest, total=False):
    FleetId: Required[str]
    RuntimeConfiguration: Required[RuntimeConfiguration]


class UpdateRuntimeConfigurationOutput(TypedDict, total=False):
    RuntimeConfiguration: RuntimeConfiguration


class UpdateScriptInput(ServiceRequest, total=False):
    ScriptId: Required[str]
    Name: str
    Version: str
    StorageLocation: S3Location
    ZipFile: bytes


class UpdateScriptOutput(TypedDict, total=False):
    Script: Script


class ValidateMatchmakingRuleSetInput(ServiceRequest, total=False):
    RuleSetBody: Required[str]


class ValidateMatchmakingRuleSetOutput(TypedDict, total=False):
    Valid: bool


class GameLiftClient(ServiceClient):
    """Client of Amazon GameLift (2015-10-01)."""

    service = "gamelift"
    version = "2015-10-01"
    client_name = "Amazon GameLift"
    errors = GameLiftErrors
    retryable_errors = RETRYABLE_ERRORS

    accept_match = Operation(
        "AcceptMatch",
        AcceptMatchInput,
        AcceptMatchOutput,
        method=HttpMethod.POST,
    )

    claim_game_server = Operation(
        "ClaimGameServer",
        ClaimGameServerInput,
        ClaimGameServerOutput,
        method=HttpMethod.POST,
    )

    create_alias = Operation(
        "CreateAlias",
        CreateAliasInput,
        CreateAliasOutput,
        method=HttpMethod.POST,
    )

    create_build = Operation(
        "CreateBuild",
        CreateBuildInput,
        CreateBuildOutput,
        method=HttpMethod.POST,
    )

    create_container_group_definition = Operation(
        "CreateContainerGroupDefinition",
        CreateContainerGroupDefinitionInput,
        CreateContainerGroupDefinitionOutput,
        method=HttpMethod.POST,
    )

    create_fleet = Operation(
        "CreateFleet",
        CreateFleetInput,
        CreateFleetOutput,
        method=HttpMethod.POST,
    )

    create_fleet_locations = Operation(
        "CreateFleetLocations",
        CreateFleetLocationsInput,
        CreateFleetLocationsOutput,
        method=HttpMethod.POST,
    )

    create_game_server_group = Operation(
        "CreateGameServerGroup",
        CreateGameServerGroupInput,
        CreateGameServerGroupOutput,
        method=HttpMethod.POST,
    )

    create_game_session = Operation(
        "CreateGameSession",
        CreateGameSessionInput,
        CreateGameSessionOutput,
        method=HttpMethod.POST,
    )

    create_game_session_queue = Operation(
        "CreateGameSessionQueue",
        CreateGameSessionQueueInput,
        CreateGameSessionQueueOutput,
        method=HttpMethod.POST,
    )

    create_location = Operation(
        "CreateLocation",
        CreateLocationInput,
        CreateLocationOutput,
        method=HttpMethod.POST,
    )

    create_matchmaking_configuration = Operation(
        "CreateMatchmakingConfiguration",
        CreateMatchmakingConfigurationInput,
        CreateMatchmakingConfigurationOutput,
        method=HttpMethod.POST,
    )

    create_matchmaking_rule_set = Operation(
        "CreateMatchmakingRuleSet",
        CreateMatchmakingRuleSetInput,
        CreateMatchmakingRuleSetOutput,
        method=HttpMethod.POST,
    )

    create_player_session = Operation(
        "CreatePlayerSession",
        CreatePlayerSessionInput,
        CreatePlayerSessionOutput,
        method=HttpMethod.POST,
    )

    create_player_sessions = Operation(
        "CreatePlayerSessions",
        CreatePlayerSessionsInput,
        CreatePlayerSessionsOutput,
        method=HttpMethod.POST,
    )

    create_script = Operation(
        "CreateScript",
        CreateScriptInput,
        CreateScriptOutput,
        method=HttpMethod.POST,
    )

    create_vpc_peering_authorization = Operation(
        "CreateVpcPeeringAuthorization",
        CreateVpcPeeringAuthorizationInput,
        CreateVpcPeeringAuthorizationOutput,
        method=HttpMethod.POST,
    )

    create_vpc_peering_connection = Operation(
        "CreateVpcPeeringConnection",
        CreateVpcPeeringConnectionInput,
        CreateVpcPeeringConnectionOutput,
        method=HttpMethod.POST,
    )

    delete_alias = Operation(
        "DeleteAlias",
        DeleteAliasInput,
        None,
        method=HttpMethod.POST,
    )

    delete_build = Operation(
        "DeleteBuild",
        DeleteBuildInput,
        None,
        method=HttpMethod.POST,
    )

    delete_container_group_definition = Operation(
        "DeleteContainerGroupDefinition",
        DeleteContainerGroupDefinitionInput,
        None,
        method=HttpMethod.POST,
    )

    delete_fleet = Operation(
        "DeleteFleet",
        DeleteFleetInput,
        None,
        method=HttpMethod.POST,
    )

    delete_fleet_locations = Operation(
        "DeleteFleetLocations",
        DeleteFleetLocationsInput,
        DeleteFleetLocationsOutput,
        method=HttpMethod.POST,
    )

    delete_game_server_group = Operation(
        "DeleteGameServerGroup",
        DeleteGameServerGroupInput,
        DeleteGameServerGroupOutput,
        method=HttpMethod.POST,
    )

    delete_game_session_queue = Operation(
        "DeleteGameSessionQueue",
        DeleteGameSessionQueueInput,
        DeleteGameSessionQueueOutput,
        method=HttpMethod.POST,
    )

    delete_location = Operation(
        "DeleteLocation",
        DeleteLocationInput,
        DeleteLocationOutput,
        method=HttpMethod.POST,
    )

    delete_matchmaking_configuration = Operation(
        "DeleteMatchmakingConfiguration",
        DeleteMatchmakingConfigurationInput,
        DeleteMatchmakingConfigurationOutput,
        method=HttpMethod.POST,
    )

    delete_matchmaking_rule_set = Operation(
        "DeleteMatchmakingRuleSet",
        DeleteMatchmakingRuleSetInput,
        DeleteMatchmakingRuleSetOutput,
        method=HttpMethod.POST,
    )

    delete_scaling_policy = Operation(
        "DeleteScalingPolicy",
        DeleteScalingPolicyInput,
        None,
        method=HttpMethod.POST,
    )

    delete_script = Operation(
        "DeleteScript",
        DeleteScriptInput,
        None,
        method=HttpMethod.POST,
    )

    delete_vpc_peering_authorization = Operation(
        "DeleteVpcPeeringAuthorization",
        DeleteVpcPeeringAuthorizationInput,
        DeleteVpcPeeringAuthorizationOutput,
        method=HttpMethod.POST,
    )

    delete_vpc_peering_connection = Operation(
        "DeleteVpcPeeringConnection",
        DeleteVpcPeeringConnectionInput,
        DeleteVpcPeeringConnectionOutput,
        method=HttpMethod.POST,
    )

    deregister_compute = Operation(
        "DeregisterCompute",
        DeregisterComputeInput,
        DeregisterComputeOutput,
        method=HttpMethod.POST,
    )

    deregister_game_server = Operation(
        "DeregisterGameServer",
        DeregisterGameServerInput,
        None,
        method=HttpMethod.POST,
    )

    describe_alias = Operation(
        "DescribeAlias",
        DescribeAliasInput,
        DescribeAliasOutput,
        method=HttpMethod.POST,
    )

    describe_build = Operation(
        "DescribeBuild",
        DescribeBuildInput,
        DescribeBuildOutput,
        method=HttpMethod.POST,
    )

    describe_compute = Operation(
        "DescribeCompute",
        DescribeComputeInput,
        DescribeComputeOutput,
        method=HttpMethod.POST,
    )

    describe_container_group_definition = Operation(
        "DescribeContainerGroupDefinition",
        DescribeContainerGroupDefinitionInput,
        DescribeContainerGroupDefinitionOutput,
        method=HttpMethod.POST,
    )

    describe_ec2_instance_limits = Operation(
        "DescribeEC2InstanceLimits",
        DescribeEC2InstanceLimitsInput,
        DescribeEC2InstanceLimitsOutput,
        method=HttpMethod.POST,
    )

    describe_fleet_attributes = Operation(
        "DescribeFleetAttributes",
        DescribeFleetAttributesInput,
        DescribeFleetAttributesOutput,
        method=HttpMethod.POST,
    )

    describe_fleet_capacity = Operation(
        "DescribeFleetCapacity",
        DescribeFleetCapacityInput,
        DescribeFleetCapacityOutput,
        method=HttpMethod.POST,
    )

    describe_fleet_events = Operation(
        "DescribeFleetEvents",
        DescribeFleetEventsInput,
        DescribeFleetEventsOutput,
        method=HttpMethod.POST,
    )

    describe_fleet_location_attributes = Operation(
        "DescribeFleetLocationAttributes",
        DescribeFleetLocationAttributesInput,
        DescribeFleetLocationAttributesOutput,
        method=HttpMethod.POST,
    )

    describe_fleet_location_capacity = Operation(
        "DescribeFleetLocationCapacity",
        DescribeFleetLocationCapacityInput,
        DescribeFleetLocationCapacityOutput,
        method=HttpMethod.POST,
    )

    describe_fleet_location_utilization = Operation(
        "DescribeFleetLocationUtilization",
        DescribeFleetLocationUtilizationInput,
        DescribeFleetLocationUtilizationOutput,
        method=HttpMethod.POST,
    )

    describe_fleet_port_settings = Operation(
        "DescribeFleetPortSettings",
        DescribeFleetPortSettingsInput,
        DescribeFleetPortSettingsOutput,
        method=HttpMethod.POST,
    )

    describe_fleet_utilization = Operation(
        "DescribeFleetUtilization",
        DescribeFleetUtilizationInput,
        DescribeFleetUtilizationOutput,
        method=HttpMethod.POST,
    )

    describe_game_server = Operation(
        "DescribeGameServer",
        DescribeGameServerInput,
        DescribeGameServerOutput,
        method=HttpMethod.POST,
    )

    describe_game_server_group = Operation(
        "DescribeGameServerGroup",
        DescribeGameServerGroupInput,
        DescribeGameServerGroupOutput,
        method=HttpMethod.POST,
    )

    describe_game_server_instances = Operation(
        "DescribeGameServerInstances",
        DescribeGameServerInstancesInput,
        DescribeGameServerInstancesOutput,
        method=HttpMethod.POST,
    )

    describe_game_session_details = Operation(
        "DescribeGameSessionDetails",
        DescribeGameSessionDetailsInput,
        DescribeGameSessionDetailsOutput,
        method=HttpMethod.POST,
    )

    describe_game_session_placement = Operation(
        "DescribeGameSessionPlacement",
        DescribeGameSessionPlacementInput,
        DescribeGameSessionPlacementOutput,
        method=HttpMethod.POST,
    )

    describe_game_session_queues = Operation(
        "DescribeGameSessionQueues",
        DescribeGameSessionQueuesInput,
        DescribeGameSessionQueuesOutput,
        method=HttpMethod.POST,
    )

    describe_game_sessions = Operation(
        "DescribeGameSessions",
        DescribeGameSessionsInput,
        DescribeGameSessionsOutput,
        method=HttpMethod.POST,
    )

    describe_instances = Operation(
        "DescribeInstances",
        DescribeInstancesInput,
        DescribeInstancesOutput,
        method=HttpMethod.POST,
    )

    describe_matchmaking = Operation(
        "DescribeMatchmaking",
        DescribeMatchmakingInput,
        DescribeMatchmakingOutput,
        method=HttpMethod.POST,
    )

    describe_matchmaking_configurations = Operation(
        "DescribeMatchmakingConfigurations",
        DescribeMatchmakingConfigurationsInput,
        DescribeMatchmakingConfigurationsOutput,
        method=HttpMethod.POST,
    )

    describe_matchmaking_rule_sets = Operation(
        "DescribeMatchmakingRuleSets",
        DescribeMatchmakingRuleSetsInput,
        DescribeMatchmakingRuleSetsOutput,
        method=HttpMethod.POST,
    )

    describe_player_sessions = Operation(
        "DescribePlayerSessions",
        DescribePlayerSessionsInput,
        DescribePlayerSessionsOutput,
        method=HttpMethod.POST,
    )

    describe_runtime_configuration = Operation(
        "DescribeRuntimeConfiguration",
        DescribeRuntimeConfigurationInput,
        DescribeRuntimeConfigurationOutput,
        method=HttpMethod.POST,
    )

    describe_scaling_policies = Operation(
        "DescribeScalingPolicies",
        DescribeScalingPoliciesInput,
        DescribeScalingPoliciesOutput,
        method=HttpMethod.POST,
    )

    describe_script = Operation(
        "DescribeScript",
        DescribeScriptInput,
        DescribeScriptOutput,
        method=HttpMethod.POST,
    )

    describe_vpc_peering_authorizations = Operation(
        "DescribeVpcPeeringAuthorizations",
        DescribeVpcPeeringAuthorizationsInput,
        DescribeVpcPeeringAuthorizationsOutput,
        method=HttpMethod.POST,
    )

    describe_vpc_peering_connections = Operation(
        "DescribeVpcPeeringConnections",
        DescribeVpcPeeringConnectionsInput,
        DescribeVpcPeeringConnectionsOutput,
        method=HttpMethod.POST,
    )

    get_compute_access = Operation(
        "GetComputeAccess",
        GetComputeAccessInput,
        GetComputeAccessOutput,
        method=HttpMethod.POST,
    )

    get_compute_auth_token = Operation(
        "GetComputeAuthToken",
        GetComputeAuthTokenInput,
        GetComputeAuthTokenOutput,
        method=HttpMethod.POST,
    )

    get_game_session_log_url = Operation(
        "GetGameSessionLogUrl",
        GetGameSessionLogUrlInput,
        GetGameSessionLogUrlOutput,
        method=HttpMethod.POST,
    )

    get_instance_access = Operation(
        "GetInstanceAccess",
        GetInstanceAccessInput,
        GetInstanceAccessOutput,
        method=HttpMethod.POST,
    )

    list_aliases = Operation(
        "ListAliases",
        ListAliasesInput,
        ListAliasesOutput,
        method=HttpMethod.POST,
    )

    list_builds = Operation(
        "ListBuilds",
        ListBuildsInput,
        ListBuildsOutput,
        method=HttpMethod.POST,
    )

    list_compute = Operation(
        "ListCompute",
        ListComputeInput,
        ListComputeOutput,
        method=HttpMethod.POST,
    )

    list_container_group_definitions = Operation(
        "ListContainerGroupDefinitions",
        ListContainerGroupDefinitionsInput,
        ListContainerGroupDefinitionsOutput,
        method=HttpMethod.POST,
    )

    list_fleets = Operation(
        "ListFleets",
        ListFleetsInput,
        ListFleetsOutput,
        method=HttpMethod.POST,
    )

    list_game_server_groups = Operation(
        "ListGameServerGroups",
        ListGameServerGroupsInput,
        ListGameServerGroupsOutput,
        method=HttpMethod.POST,
    )

    list_game_servers = Operation(
        "ListGameServers",
        ListGameServersInput,
        ListGameServersOutput,
        method=HttpMethod.POST,
    )

    list_locations = Operation(
        "ListLocations",
        ListLocationsInput,
        ListLocationsOutput,
        method=HttpMethod.POST,
    )

    list_scripts = Operation(
        "ListScripts",
        ListScriptsInput,
        ListScriptsOutput,
        method=HttpMethod.POST,
    )

    list_tags_for_resource = Operation(
        "ListTagsForResource",
        ListTagsForResourceRequest,
        ListTagsForResourceResponse,
        method=HttpMethod.POST,
    )

    put_scaling_policy = Operation(
        "PutScalingPolicy",
        PutScalingPolicyInput,
        PutScalingPolicyOutput,
        method=HttpMethod.POST,
    )

    register_compute = Operation(
        "RegisterCompute",
        RegisterComputeInput,
        RegisterComputeOutput,
        method=HttpMethod.POST,
    )

    register_game_server = Operation(
        "RegisterGameServer",
        RegisterGameServerInput,
        RegisterGameServerOutput,
        method=HttpMethod.POST,
    )

    request_upload_credentials = Operation(
        "RequestUploadCredentials",
        RequestUploadCredentialsInput,
        RequestUploadCredentialsOutput,
        method=HttpMethod.POST,
    )

    resolve_alias = Operation(
        "ResolveAlias",
        ResolveAliasInput,
        ResolveAliasOutput,
        method=HttpMethod.POST,
    )

    resume_game_server_group = Operation(
        "ResumeGameServerGroup",
        ResumeGameServerGroupInput,
        ResumeGameServerGroupOutput,
        method=HttpMethod.POST,
    )

    search_game_sessions = Operation(
        "SearchGameSessions",
        SearchGameSessionsInput,
        SearchGameSessionsOutput,
        method=HttpMethod.POST,
    )

    start_fleet_actions = Operation(
        "StartFleetActions",
        StartFleetActionsInput,
        StartFleetActionsOutput,
        method=HttpMethod.POST,
    )

    start_game_session_placement = Operation(
        "StartGameSessionPlacement",
        StartGameSessionPlacementInput,
        StartGameSessionPlacementOutput,
        method=HttpMethod.POST,
    )

    start_match_backfill = Operation(
        "StartMatchBackfill",
        StartMatchBackfillInput,
        StartMatchBackfillOutput,
        method=HttpMethod.POST,
    )

    start_matchmaking = Operation(
        "StartMatchmaking",
        StartMatchmakingInput,
        StartMatchmakingOutput,
        method=HttpMethod.POST,
    )

    stop_fleet_actions = Operation(
        "StopFleetActions",
        StopFleetActionsInput,
        StopFleetActionsOutput,
        method=HttpMethod.POST,
    )

    stop_game_session_placement = Operation(
        "StopGameSessionPlacement",
        StopGameSessionPlacementInput,
        StopGameSessionPlacementOutput,
        method=HttpMethod.POST,
    )

    stop_matchmaking = Operation(
        "StopMatchmaking",
        StopMatchmakingInput,
        StopMatchmakingOutput,
        method=HttpMethod.POST,
    )

    suspend_game_server_group = Operation(
        "SuspendGameServerGroup",
        SuspendGameServerGroupInput,
        SuspendGameServerGroupOutput,
        method=HttpMethod.POST,
    )

    tag_resource = Operation(
        "TagResource",
        TagResourceRequest,
        TagResourceResponse,
        method=HttpMethod.POST,
    )

    untag_resource = Operation(
        "UntagResource",
        UntagResourceRequest,
        UntagResourceResponse,
        method=HttpMethod.POST,
    )

    update_alias = Operation(
        "UpdateAlias",
        UpdateAliasInput,
        UpdateAliasOutput,
        method=HttpMethod.POST,
    )

    update_build = Operation(
        "UpdateBuild",
        UpdateBuildInput,
        UpdateBuildOutput,
        method=HttpMethod.POST,
    )

    update_fleet_attributes = Operation(
        "UpdateFleetAttributes",
        UpdateFleetAttributesInput,
        UpdateFleetAttributesOutput,
        method=HttpMethod.POST,
    )

    update_fleet_capacity = Operation(
        "UpdateFleetCapacity",
        UpdateFleetCapacityInput,
        UpdateFleetCapacityOutput,
        method=HttpMethod.POST,
    )

    update_fleet_port_settings = Operation(
        "UpdateFleetPortSettings",
        UpdateFleetPortSettingsInput,
        UpdateFleetPortSettingsOutput,
        method=HttpMethod.POST,
    )

    update_game_server = Operation(
        "UpdateGameServer",
        UpdateGameServerInput,
        UpdateGameServerOutput,
        method=HttpMethod.POST,
    )

    update_game_server_group = Operation(
        "UpdateGameServerGroup",
        UpdateGameServerGroupInput,
        UpdateGameServerGroupOutput,
        method=HttpMethod.POST,
    )

    update_game_session = Operation(
        "UpdateGameSession",
        UpdateGameSessionInput,
        UpdateGameSessionOutput,
        method=HttpMethod.POST,
    )

    update_game_session_queue = Operation(
        "UpdateGameSessionQueue",
        UpdateGameSessionQueueInput,
        UpdateGameSessionQueueOutput,
        method=HttpMethod.POST,
    )

    update_matchmaking_configuration = Operation(
        "UpdateMatchmakingConfiguration",
        UpdateMatchmakingConfigurationInput,
        UpdateMatchmakingConfigurationOutput,
        method=HttpMethod.POST,
    )

    update_runtime_configuration = Operation(
        "UpdateRuntimeConfiguration",
        UpdateRuntimeConfigurationInput,
        UpdateRuntimeConfigurationOutput,
        method=HttpMethod.POST,
    )

    update_script = Operation(
        "UpdateScript",
        UpdateScriptInput,
        UpdateScriptOutput,
        method=HttpMethod.POST,
    )

    validate_matchmaking_rule_set = Operation(
        "ValidateMatchmakingRuleSet",
        ValidateMatchmakingRuleSetInput,
        ValidateMatchmakingRuleSetOutput,
        method=HttpMethod.POST,
    )
