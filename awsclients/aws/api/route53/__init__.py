from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Required, TypedDict

from awsclients.aws.api.core import HttpMethod, ServiceRequest, SignerType
from awsclients.aws.service import Operation, ServiceClient

AccountLimitType = Literal["MAX_HEALTH_CHECKS_BY_OWNER", "MAX_HOSTED_ZONES_BY_OWNER", "MAX_TRAFFIC_POLICY_INSTANCES_BY_OWNER", "MAX_REUSABLE_DELEGATION_SETS_BY_OWNER", "MAX_TRAFFIC_POLICIES_BY_OWNER"]
ChangeAction = Literal["CREATE", "DELETE", "UPSERT"]
ChangeStatus = Literal["PENDING", "INSYNC"]
CidrCollectionChangeAction = Literal["PUT", "DELETE_IF_EXISTS"]
CloudWatchRegion = Literal["us-east-1", "us-east-2", "us-west-1", "us-west-2", "ca-central-1", "eu-central-1", "eu-central-2", "eu-west-1", "eu-west-2", "eu-west-3", "ap-east-1", "me-south-1", "me-central-1", "ap-south-1", "ap-south-2", "ap-southeast-1", "ap-southeast-2", "ap-southeast-3", "ap-northeast-1", "ap-northeast-2", "ap-northeast-3", "eu-north-1", "sa-east-1", "cn-northwest-1", "cn-north-1", "af-south-1", "eu-south-1", "eu-south-2", "us-gov-west-1", "us-gov-east-1", "us-iso-east-1", "us-iso-west-1", "us-isob-east-1", "ap-southeast-4", "il-central-1", "ca-west-1"]
ComparisonOperator = Literal["GreaterThanOrEqualToThreshold", "GreaterThanThreshold", "LessThanThreshold", "LessThanOrEqualToThreshold"]
HealthCheckRegion = Literal["us-east-1", "us-west-1", "us-west-2", "eu-west-1", "ap-southeast-1", "ap-southeast-2", "ap-northeast-1", "sa-east-1"]
HealthCheckType = Literal["HTTP", "HTTPS", "HTTP_STR_MATCH", "HTTPS_STR_MATCH", "TCP", "CALCULATED", "CLOUDWATCH_METRIC", "RECOVERY_CONTROL"]
HostedZoneLimitType = Literal["MAX_RRSETS_BY_ZONE", "MAX_VPCS_ASSOCIATED_BY_ZONE"]
HostedZoneType = Literal["PrivateHostedZone"]
InsufficientDataHealthStatus = Literal["Healthy", "Unhealthy", "LastKnownStatus"]
RRType = Literal["SOA", "A", "TXT", "NS", "CNAME", "MX", "NAPTR", "PTR", "SRV", "SPF", "AAAA", "CAA", "DS"]
ResettableElementName = Literal["FullyQualifiedDomainName", "Regions", "ResourcePath", "ChildHealthChecks"]
ResourceRecordSetFailover = Literal["PRIMARY", "SECONDARY"]
ResourceRecordSetRegion = Literal["us-east-1", "us-east-2", "us-west-1", "us-west-2", "ca-central-1", "eu-west-1", "eu-west-2", "eu-west-3", "eu-central-1", "eu-central-2", "ap-southeast-1", "ap-southeast-2", "ap-southeast-3", "ap-northeast-1", "ap-northeast-2", "ap-northeast-3", "eu-north-1", "sa-east-1", "cn-north-1", "cn-northwest-1", "ap-east-1", "me-south-1", "me-central-1", "ap-south-1", "ap-south-2", "af-south-1", "eu-south-1", "eu-south-2", "ap-southeast-4", "il-central-1", "ca-west-1"]
ReusableDelegationSetLimitType = Literal["MAX_ZONES_BY_REUSABLE_DELEGATION_SET"]
Statistic = Literal["Average", "Sum", "SampleCount", "Maximum", "Minimum"]
TagResourceType = Literal["healthcheck", "hostedzone"]
VPCRegion = Literal["us-east-1", "us-east-2", "us-west-1", "us-west-2", "eu-west-1", "eu-west-2", "eu-west-3", "eu-central-1", "eu-central-2", "ap-east-1", "me-south-1", "us-gov-west-1", "us-gov-east-1", "us-iso-east-1", "us-iso-west-1", "us-isob-east-1", "me-central-1", "ap-southeast-1", "ap-southeast-2", "ap-southeast-3", "ap-south-1", "ap-south-2", "ap-northeast-1", "ap-northeast-2", "ap-northeast-3", "eu-north-1", "sa-east-1", "ca-central-1", "cn-north-1", "af-south-1", "eu-south-1", "eu-south-2", "ap-southeast-4", "il-central-1", "ca-west-1"]


class Route53Errors(str, Enum):
    CIDR_BLOCK_IN_USE = "CidrBlockInUseException"
    CIDR_COLLECTION_ALREADY_EXISTS = "CidrCollectionAlreadyExistsException"
    CIDR_COLLECTION_IN_USE = "CidrCollectionInUseException"
    CIDR_COLLECTION_VERSION_MISMATCH = "CidrCollectionVersionMismatchException"
    CONCURRENT_MODIFICATION = "ConcurrentModification"
    CONFLICTING_DOMAIN_EXISTS = "ConflictingDomainExists"
    CONFLICTING_TYPES = "ConflictingTypes"
    DNSSEC_NOT_FOUND = "DNSSECNotFound"
    DELEGATION_SET_ALREADY_CREATED = "DelegationSetAlreadyCreated"
    DELEGATION_SET_ALREADY_REUSABLE = "DelegationSetAlreadyReusable"
    DELEGATION_SET_IN_USE = "DelegationSetInUse"
    DELEGATION_SET_NOT_AVAILABLE = "DelegationSetNotAvailable"
    DELEGATION_SET_NOT_REUSABLE = "DelegationSetNotReusable"
    HEALTH_CHECK_ALREADY_EXISTS = "HealthCheckAlreadyExists"
    HEALTH_CHECK_IN_USE = "HealthCheckInUse"
    HEALTH_CHECK_VERSION_MISMATCH = "HealthCheckVersionMismatch"
    HOSTED_ZONE_ALREADY_EXISTS = "HostedZoneAlreadyExists"
    HOSTED_ZONE_NOT_EMPTY = "HostedZoneNotEmpty"
    HOSTED_ZONE_NOT_FOUND = "HostedZoneNotFound"
    HOSTED_ZONE_NOT_PRIVATE = "HostedZoneNotPrivate"
    HOSTED_ZONE_PARTIALLY_DELEGATED = "HostedZonePartiallyDelegated"
    INCOMPATIBLE_VERSION = "IncompatibleVersion"
    INSUFFICIENT_CLOUD_WATCH_LOGS_RESOURCE_POLICY = "InsufficientCloudWatchLogsResourcePolicy"
    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_CHANGE_BATCH = "InvalidChangeBatch"
    INVALID_DOMAIN_NAME = "InvalidDomainName"
    INVALID_INPUT = "InvalidInput"
    INVALID_KMS_ARN = "InvalidKMSArn"
    INVALID_KEY_SIGNING_KEY_NAME = "InvalidKeySigningKeyName"
    INVALID_KEY_SIGNING_KEY_STATUS = "InvalidKeySigningKeyStatus"
    INVALID_PAGINATION_TOKEN = "InvalidPaginationToken"
    INVALID_SIGNING_STATUS = "InvalidSigningStatus"
    INVALID_TRAFFIC_POLICY_DOCUMENT = "InvalidTrafficPolicyDocument"
    INVALID_VPC_ID = "InvalidVPCId"
    KEY_SIGNING_KEY_ALREADY_EXISTS = "KeySigningKeyAlreadyExists"
    KEY_SIGNING_KEY_IN_PARENT_DS_RECORD = "KeySigningKeyInParentDSRecord"
    KEY_SIGNING_KEY_IN_USE = "KeySigningKeyInUse"
    KEY_SIGNING_KEY_WITH_ACTIVE_STATUS_NOT_FOUND = "KeySigningKeyWithActiveStatusNotFound"
    LAST_VPC_ASSOCIATION = "LastVPCAssociation"
    LIMITS_EXCEEDED = "LimitsExceeded"
    NO_SUCH_CHANGE = "NoSuchChange"
    NO_SUCH_CIDR_COLLECTION = "NoSuchCidrCollectionException"
    NO_SUCH_CIDR_LOCATION = "NoSuchCidrLocationException"
    NO_SUCH_CLOUD_WATCH_LOGS_LOG_GROUP = "NoSuchCloudWatchLogsLogGroup"
    NO_SUCH_DELEGATION_SET = "NoSuchDelegationSet"
    NO_SUCH_GEO_LOCATION = "NoSuchGeoLocation"
    NO_SUCH_HEALTH_CHECK = "NoSuchHealthCheck"
    NO_SUCH_HOSTED_ZONE = "NoSuchHostedZone"
    NO_SUCH_KEY_SIGNING_KEY = "NoSuchKeySigningKey"
    NO_SUCH_QUERY_LOGGING_CONFIG = "NoSuchQueryLoggingConfig"
    NO_SUCH_TRAFFIC_POLICY = "NoSuchTrafficPolicy"
    NO_SUCH_TRAFFIC_POLICY_INSTANCE = "NoSuchTrafficPolicyInstance"
    NOT_AUTHORIZED = "NotAuthorizedException"
    PRIOR_REQUEST_NOT_COMPLETE = "PriorRequestNotComplete"
    PUBLIC_ZONE_VPC_ASSOCIATION = "PublicZoneVPCAssociation"
    QUERY_LOGGING_CONFIG_ALREADY_EXISTS = "QueryLoggingConfigAlreadyExists"
    THROTTLING = "ThrottlingException"
    TOO_MANY_HEALTH_CHECKS = "TooManyHealthChecks"
    TOO_MANY_HOSTED_ZONES = "TooManyHostedZones"
    TOO_MANY_KEY_SIGNING_KEYS = "TooManyKeySigningKeys"
    TOO_MANY_TRAFFIC_POLICIES = "TooManyTrafficPolicies"
    TOO_MANY_TRAFFIC_POLICY_INSTANCES = "TooManyTrafficPolicyInstances"
    TOO_MANY_TRAFFIC_POLICY_VERSIONS_FOR_CURRENT_POLICY = "TooManyTrafficPolicyVersionsForCurrentPolicy"
    TOO_MANY_VPC_ASSOCIATION_AUTHORIZATIONS = "TooManyVPCAssociationAuthorizations"
    TRAFFIC_POLICY_ALREADY_EXISTS = "TrafficPolicyAlreadyExists"
    TRAFFIC_POLICY_IN_USE = "TrafficPolicyInUse"
    TRAFFIC_POLICY_INSTANCE_ALREADY_EXISTS = "TrafficPolicyInstanceAlreadyExists"
    VPC_ASSOCIATION_AUTHORIZATION_NOT_FOUND = "VPCAssociationAuthorizationNotFound"
    VPC_ASSOCIATION_NOT_FOUND = "VPCAssociationNotFound"


RETRYABLE_ERRORS = frozenset(
    {
        Route53Errors.PRIOR_REQUEST_NOT_COMPLETE,
    }
)


class ActivateKeySigningKeyRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    Name: Required[str]


class ChangeInfo(TypedDict, total=False):
    Id: Required[str]
    Status: Required[ChangeStatus]
    SubmittedAt: Required[datetime]
    Comment: str


class ActivateKeySigningKeyResponse(TypedDict, total=False):
    ChangeInfo: Required[ChangeInfo]


class VPC(TypedDict, total=False):
    VPCRegion: VPCRegion
    VPCId: str


class AssociateVPCWithHostedZoneRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    VPC: Required[VPC]
    Comment: str


class AssociateVPCWithHostedZoneResponse(TypedDict, total=False):
    ChangeInfo: Required[ChangeInfo]


class CidrCollectionChange(TypedDict, total=False):
    LocationName: Required[str]
    Action: Required[CidrCollectionChangeAction]
    CidrList: Required[List[str]]


class ChangeCidrCollectionRequest(ServiceRequest, total=False):
    Id: Required[str]
    CollectionVersion: int
    Changes: Required[List[CidrCollectionChange]]


class ChangeCidrCollectionResponse(TypedDict, total=False):
    Id: Required[str]


class GeoLocation(TypedDict, total=False):
    ContinentCode: str
    CountryCode: str
    SubdivisionCode: str


class ResourceRecord(TypedDict, total=False):
    Value: Required[str]


class AliasTarget(TypedDict, total=False):
    HostedZoneId: Required[str]
    DNSName: Required[str]
    EvaluateTargetHealth: Required[bool]


class CidrRoutingConfig(TypedDict, total=False):
    CollectionId: Required[str]
    LocationName: Required[str]


class Coordinates(TypedDict, total=False):
    Latitude: Required[str]
    Longitude: Required[str]


class GeoProximityLocation(TypedDict, total=False):
    AWSRegion: str
    LocalZoneGroup: str
    Coordinates: Coordinates
    Bias: int


class ResourceRecordSet(TypedDict, total=False):
    Name: Required[str]
    Type: Required[RRType]
    SetIdentifier: str
    Weight: int
    Region: ResourceRecordSetRegion
    GeoLocation: GeoLocation
    Failover: ResourceRecordSetFailover
    MultiValueAnswer: bool
    TTL: int
    ResourceRecords: List[ResourceRecord]
    AliasTarget: AliasTarget
    HealthCheckId: str
    TrafficPolicyInstanceId: str
    CidrRoutingConfig: CidrRoutingConfig
    GeoProximityLocation: GeoProximityLocation


class Change(TypedDict, total=False):
    Action: Required[ChangeAction]
    ResourceRecordSet: Required[ResourceRecordSet]


class ChangeBatch(TypedDict, total=False):
    Comment: str
    Changes: Required[List[Change]]


class ChangeResourceRecordSetsRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    ChangeBatch: Required[ChangeBatch]


class ChangeResourceRecordSetsResponse(TypedDict, total=False):
    ChangeInfo: Required[ChangeInfo]


class Tag(TypedDict, total=False):
    Key: str
    Value: str


class ChangeTagsForResourceRequest(ServiceRequest, total=False):
    ResourceType: Required[TagResourceType]
    ResourceId: Required[str]
    AddTags: List[Tag]
    RemoveTagKeys: List[str]


class ChangeTagsForResourceResponse(TypedDict, total=False):
    pass


class CreateCidrCollectionRequest(ServiceRequest, total=False):
    Name: Required[str]
    CallerReference: Required[str]


class CidrCollection(TypedDict, total=False):
    Arn: str
    Id: str
    Name: str
    Version: int


class CreateCidrCollectionResponse(TypedDict, total=False):
    Collection: CidrCollection
    Location: str


class AlarmIdentifier(TypedDict, total=False):
    Region: Required[CloudWatchRegion]
    Name: Required[str]


class HealthCheckConfig(TypedDict, total=False):
    IPAddress: str
    Port: int
    Type: Required[HealthCheckType]
    ResourcePath: str
    FullyQualifiedDomainName: str
    SearchString: str
    RequestInterval: int
    FailureThreshold: int
    MeasureLatency: bool
    Inverted: bool
    Disabled: bool
    HealthThreshold: int
    ChildHealthChecks: List[str]
    EnableSNI: bool
    Regions: List[HealthCheckRegion]
    AlarmIdentifier: AlarmIdentifier
    InsufficientDataHealthStatus: InsufficientDataHealthStatus
    RoutingControlArn: str


class CreateHealthCheckRequest(ServiceRequest, total=False):
    CallerReference: Required[str]
    HealthCheckConfig: Required[HealthCheckConfig]


class LinkedService(TypedDict, total=False):
    ServicePrincipal: str
    Description: str


class Dimension(TypedDict, total=False):
    Name: Required[str]
    Value: Required[str]


class CloudWatchAlarmConfiguration(TypedDict, total=False):
    EvaluationPeriods: Required[int]
    Threshold: Required[float]
    ComparisonOperator: Required[ComparisonOperator]
    Period: Required[int]
    MetricName: Required[str]
    Namespace: Required[str]
    Statistic: Required[Statistic]
    Dimensions: List[Dimension]


class HealthCheck(TypedDict, total=False):
    Id: Required[str]
    CallerReference: Required[str]
    LinkedService: LinkedService
    HealthCheckConfig: Required[HealthCheckConfig]
    HealthCheckVersion: Required[int]
    CloudWatchAlarmConfiguration: CloudWatchAlarmConfiguration


class CreateHealthCheckResponse(TypedDict, total=False):
    HealthCheck: Required[HealthCheck]
    Location: Required[str]


class HostedZoneConfig(TypedDict, total=False):
    Comment: str
    PrivateZone: bool


class CreateHostedZoneRequest(ServiceRequest, total=False):
    Name: Required[str]
    VPC: VPC
    CallerReference: Required[str]
    HostedZoneConfig: HostedZoneConfig
    DelegationSetId: str


class HostedZone(TypedDict, total=False):
    Id: Required[str]
    Name: Required[str]
    CallerReference: Required[str]
    Config: HostedZoneConfig
    ResourceRecordSetCount: int
    LinkedService: LinkedService


class DelegationSet(TypedDict, total=False):
    Id: str
    CallerReference: str
    NameServers: Required[List[str]]


class CreateHostedZoneResponse(TypedDict, total=False):
    HostedZone: Required[HostedZone]
    ChangeInfo: Required[ChangeInfo]
    DelegationSet: Required[DelegationSet]
    VPC: VPC
    Location: Required[str]


class CreateKeySigningKeyRequest(ServiceRequest, total=False):
    CallerReference: Required[str]
    HostedZoneId: Required[str]
    KeyManagementServiceArn: Required[str]
    Name: Required[str]
    Status: Required[str]


class KeySigningKey(TypedDict, total=False):
    Name: str
    KmsArn: str
    Flag: int
    SigningAlgorithmMnemonic: str
    SigningAlgorithmType: int
    DigestAlgorithmMnemonic: str
    DigestAlgorithmType: int
    KeyTag: int
    DigestValue: str
    PublicKey: str
    DSRecord: str
    DNSKEYRecord: str
    Status: str
    StatusMessage: str
    CreatedDate: datetime
    LastModifiedDate: datetime


class CreateKeySigningKeyResponse(TypedDict, total=False):
    ChangeInfo: Required[ChangeInfo]
    KeySigningKey: Required[KeySigningKey]
    Location: Required[str]


class CreateQueryLoggingConfigRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    CloudWatchLogsLogGroupArn: Required[str]


class QueryLoggingConfig(TypedDict, total=False):
    Id: Required[str]
    HostedZoneId: Required[str]
    CloudWatchLogsLogGroupArn: Required[str]


class CreateQueryLoggingConfigResponse(TypedDict, total=False):
    QueryLoggingConfig: Required[QueryLoggingConfig]
    Location: Required[str]


class CreateReusableDelegationSetRequest(ServiceRequest, total=False):
    CallerReference: Required[str]
    HostedZoneId: str


class CreateReusableDelegationSetResponse(TypedDict, total=False):
    DelegationSet: Required[DelegationSet]
    Location: Required[str]


class CreateTrafficPolicyRequest(ServiceRequest, total=False):
    Name: Required[str]
    Document: Required[str]
    Comment: str


class TrafficPolicy(TypedDict, total=False):
    Id: Required[str]
    Version: Required[int]
    Name: Required[str]
    Type: Required[RRType]
    Document: Required[str]
    Comment: str


class CreateTrafficPolicyResponse(TypedDict, total=False):
    TrafficPolicy: Required[TrafficPolicy]
    Location: Required[str]


class CreateTrafficPolicyInstanceRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    Name: Required[str]
    TTL: Required[int]
    TrafficPolicyId: Required[str]
    TrafficPolicyVersion: Required[int]


class TrafficPolicyInstance(TypedDict, total=False):
    Id: Required[str]
    HostedZoneId: Required[str]
    Name: Required[str]
    TTL: Required[int]
    State: Required[str]
    Message: Required[str]
    TrafficPolicyId: Required[str]
    TrafficPolicyVersion: Required[int]
    TrafficPolicyType: Required[RRType]


class CreateTrafficPolicyInstanceResponse(TypedDict, total=False):
    TrafficPolicyInstance: Required[TrafficPolicyInstance]
    Location: Required[str]


class CreateTrafficPolicyVersionRequest(ServiceRequest, total=False):
    Id: Required[str]
    Document: Required[str]
    Comment: str


class CreateTrafficPolicyVersionResponse(TypedDict, total=False):
    TrafficPolicy: Required[TrafficPolicy]
    Location: Required[str]


class CreateVPCAssociationAuthorizationRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    VPC: Required[VPC]


class CreateVPCAssociationAuthorizationResponse(TypedDict, total=False):
    HostedZoneId: Required[str]
    VPC: Required[VPC]


class DeactivateKeySigningKeyRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    Name: Required[str]


class DeactivateKeySigningKeyResponse(TypedDict, total=False):
    ChangeInfo: Required[ChangeInfo]


class DeleteCidrCollectionRequest(ServiceRequest, total=False):
    Id: Required[str]


class DeleteCidrCollectionResponse(TypedDict, total=False):
    pass


class DeleteHealthCheckRequest(ServiceRequest, total=False):
    HealthCheckId: Required[str]


class DeleteHealthCheckResponse(TypedDict, total=False):
    pass


class DeleteHostedZoneRequest(ServiceRequest, total=False):
    Id: Required[str]


class DeleteHostedZoneResponse(TypedDict, total=False):
    ChangeInfo: Required[ChangeInfo]


class DeleteKeySigningKeyRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    Name: Required[str]


class DeleteKeySigningKeyResponse(TypedDict, total=False):
    ChangeInfo: Required[ChangeInfo]


class DeleteQueryLoggingConfigRequest(ServiceRequest, total=False):
    Id: Required[str]


class DeleteQueryLoggingConfigResponse(TypedDict, total=False):
    pass


class DeleteReusableDelegationSetRequest(ServiceRequest, total=False):
    Id: Required[str]


class DeleteReusableDelegationSetResponse(TypedDict, total=False):
    pass


class DeleteTrafficPolicyRequest(ServiceRequest, total=False):
    Id: Required[str]
    Version: Required[int]


class DeleteTrafficPolicyResponse(TypedDict, total=False):
    pass


class DeleteTrafficPolicyInstanceRequest(ServiceRequest, total=False):
    Id: Required[str]


class DeleteTrafficPolicyInstanceResponse(TypedDict, total=False):
    pass


class DeleteVPCAssociationAuthorizationRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    VPC: Required[VPC]


class DeleteVPCAssociationAuthorizationResponse(TypedDict, total=False):
    pass


class DisableHostedZoneDNSSECRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]


class DisableHostedZoneDNSSECResponse(TypedDict, total=False):
    ChangeInfo: Required[ChangeInfo]


class DisassociateVPCFromHostedZoneRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    VPC: Required[VPC]
    Comment: str


class DisassociateVPCFromHostedZoneResponse(TypedDict, total=False):
    ChangeInfo: Required[ChangeInfo]


class EnableHostedZoneDNSSECRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]


class EnableHostedZoneDNSSECResponse(TypedDict, total=False):
    ChangeInfo: Required[ChangeInfo]


class GetAccountLimitRequest(ServiceRequest, total=False):
    Type: Required[AccountLimitType]


class AccountLimit(TypedDict, total=False):
    Type: Required[AccountLimitType]
    Value: Required[int]


class GetAccountLimitResponse(TypedDict, total=False):
    Limit: Required[AccountLimit]
    Count: Required[int]


class GetChangeRequest(ServiceRequest, total=False):
    Id: Required[str]


class GetChangeResponse(TypedDict, total=False):
    ChangeInfo: Required[ChangeInfo]


class GetCheckerIpRangesRequest(ServiceRequest, total=False):
    pass


class GetCheckerIpRangesResponse(TypedDict, total=False):
    CheckerIpRanges: Required[List[str]]


class GetDNSSECRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]


class DNSSECStatus(TypedDict, total=False):
    ServeSignature: str
    StatusMessage: str


class GetDNSSECResponse(TypedDict, total=False):
    Status: Required[DNSSECStatus]
    KeySigningKeys: Required[List[KeySigningKey]]


class GetGeoLocationRequest(ServiceRequest, total=False):
    ContinentCode: str
    CountryCode: str
    SubdivisionCode: str


class GeoLocationDetails(TypedDict, total=False):
    ContinentCode: str
    ContinentName: str
    CountryCode: str
    CountryName: str
    SubdivisionCode: str
    SubdivisionName: str


class GetGeoLocationResponse(TypedDict, total=False):
    GeoLocationDetails: Required[GeoLocationDetails]


class GetHealthCheckRequest(ServiceRequest, total=False):
    HealthCheckId: Required[str]


class GetHealthCheckResponse(TypedDict, total=False):
    HealthCheck: Required[HealthCheck]


class GetHealthCheckCountRequest(ServiceRequest, total=False):
    pass


class GetHealthCheckCountResponse(TypedDict, total=False):
    HealthCheckCount: Required[int]


class GetHealthCheckLastFailureReasonRequest(ServiceRequest, total=False):
    HealthCheckId: Required[str]


class StatusReport(TypedDict, total=False):
    Status: str
    CheckedTime: datetime


class HealthCheckObservation(TypedDict, total=False):
    Region: HealthCheckRegion
    IPAddress: str
    StatusReport: StatusReport


class GetHealthCheckLastFailureReasonResponse(TypedDict, total=False):
    HealthCheckObservations: Required[List[HealthCheckObservation]]


class GetHealthCheckStatusRequest(ServiceRequest, total=False):
    HealthCheckId: Required[str]


class GetHealthCheckStatusResponse(TypedDict, total=False):
    HealthCheckObservations: Required[List[HealthCheckObservation]]


class GetHostedZoneRequest(ServiceRequest, total=False):
    Id: Required[str]


class GetHostedZoneResponse(TypedDict, total=False):
    HostedZone: Required[HostedZone]
    DelegationSet: DelegationSet
    VPCs: List[VPC]


class GetHostedZoneCountRequest(ServiceRequest, total=False):
    pass


class GetHostedZoneCountResponse(TypedDict, total=False):
    HostedZoneCount: Required[int]


class GetHostedZoneLimitRequest(ServiceRequest, total=False):
    Type: Required[HostedZoneLimitType]
    HostedZoneId: Required[str]


class HostedZoneLimit(TypedDict, total=False):
    Type: Required[HostedZoneLimitType]
    Value: Required[int]


class GetHostedZoneLimitResponse(TypedDict, total=False):
    Limit: Required[HostedZoneLimit]
    Count: Required[int]


class GetQueryLoggingConfigRequest(ServiceRequest, total=False):
    Id: Required[str]


class GetQueryLoggingConfigResponse(TypedDict, total=False):
    QueryLoggingConfig: Required[QueryLoggingConfig]


class GetReusableDelegationSetRequest(ServiceRequest, total=False):
    Id: Required[str]


class GetReusableDelegationSetResponse(TypedDict, total=False):
    DelegationSet: Required[DelegationSet]


class GetReusableDelegationSetLimitRequest(ServiceRequest, total=False):
    Type: Required[ReusableDelegationSetLimitType]
    DelegationSetId: Required[str]


class ReusableDelegationSetLimit(TypedDict, total=False):
    Type: Required[ReusableDelegationSetLimitType]
    Value: Required[int]


class GetReusableDelegationSetLimitResponse(TypedDict, total=False):
    Limit: Required[ReusableDelegationSetLimit]
    Count: Required[int]


class GetTrafficPolicyRequest(ServiceRequest, total=False):
    Id: Required[str]
    Version: Required[int]


class GetTrafficPolicyResponse(TypedDict, total=False):
    TrafficPolicy: Required[TrafficPolicy]


class GetTrafficPolicyInstanceRequest(ServiceRequest, total=False):
    Id: Required[str]


class GetTrafficPolicyInstanceResponse(TypedDict, total=False):
    TrafficPolicyInstance: Required[TrafficPolicyInstance]


class GetTrafficPolicyInstanceCountRequest(ServiceRequest, total=False):
    pass


class GetTrafficPolicyInstanceCountResponse(TypedDict, total=False):
    TrafficPolicyInstanceCount: Required[int]


class ListCidrBlocksRequest(ServiceRequest, total=False):
    CollectionId: Required[str]
    LocationName: str
    NextToken: str
    MaxResults: str


class CidrBlockSummary(TypedDict, total=False):
    CidrBlock: str
    LocationName: str


class ListCidrBlocksResponse(TypedDict, total=False):
    NextToken: str
    CidrBlocks: List[CidrBlockSummary]


class ListCidrCollectionsRequest(ServiceRequest, total=False):
    NextToken: str
    MaxResults: str


class CollectionSummary(TypedDict, total=False):
    Arn: str
    Id: str
    Name: str
    Version: int


class ListCidrCollectionsResponse(TypedDict, total=False):
    NextToken: str
    CidrCollections: List[CollectionSummary]


class ListCidrLocationsRequest(ServiceRequest, total=False):
    CollectionId: Required[str]
    NextToken: str
    MaxResults: str


class LocationSummary(TypedDict, total=False):
    LocationName: str


class ListCidrLocationsResponse(TypedDict, total=False):
    NextToken: str
    CidrLocations: List[LocationSummary]


class ListGeoLocationsRequest(ServiceRequest, total=False):
    StartContinentCode: str
    StartCountryCode: str
    StartSubdivisionCode: str
    MaxItems: str


class ListGeoLocationsResponse(TypedDict, total=False):
    GeoLocationDetailsList: Required[List[GeoLocationDetails]]
    IsTruncated: Required[bool]
    NextContinentCode: str
    NextCountryCode: str
    NextSubdivisionCode: str
    MaxItems: Required[str]


class ListHealthChecksRequest(ServiceRequest, total=False):
    Marker: str
    MaxItems: str


class ListHealthChecksResponse(TypedDict, total=False):
    HealthChecks: Required[List[HealthCheck]]
    Marker: Required[str]
    IsTruncated: Required[bool]
    NextMarker: str
    MaxItems: Required[str]


class ListHostedZonesRequest(ServiceRequest, total=False):
    Marker: str
    MaxItems: str
    DelegationSetId: str
    HostedZoneType: HostedZoneType


class ListHostedZonesResponse(TypedDict, total=False):
    HostedZones: Required[List[HostedZone]]
    Marker: Required[str]
    IsTruncated: Required[bool]
    NextMarker: str
    MaxItems: Required[str]


class ListHostedZonesByNameRequest(ServiceRequest, total=False):
    DNSName: str
    HostedZoneId: str
    MaxItems: str


class ListHostedZonesByNameResponse(TypedDict, total=False):
    HostedZones: Required[List[HostedZone]]
    DNSName: str
    HostedZoneId: str
    IsTruncated: Required[bool]
    NextDNSName: str
    NextHostedZoneId: str
    MaxItems: Required[str]


class ListHostedZonesByVPCRequest(ServiceRequest, total=False):
    VPCId: Required[str]
    VPCRegion: Required[VPCRegion]
    MaxItems: str
    NextToken: str


class HostedZoneOwner(TypedDict, total=False):
    OwningAccount: str
    OwningService: str


class HostedZoneSummary(TypedDict, total=False):
    HostedZoneId: Required[str]
    Name: Required[str]
    Owner: Required[HostedZoneOwner]


class ListHostedZonesByVPCResponse(TypedDict, total=False):
    HostedZoneSummaries: Required[List[HostedZoneSummary]]
    MaxItems: Required[str]
    NextToken: str


class ListQueryLoggingConfigsRequest(ServiceRequest, total=False):
    HostedZoneId: str
    NextToken: str
    MaxResults: str


class ListQueryLoggingConfigsResponse(TypedDict, total=False):
    QueryLoggingConfigs: Required[List[QueryLoggingConfig]]
    NextToken: str


class ListResourceRecordSetsRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    StartRecordName: str
    StartRecordType: RRType
    StartRecordIdentifier: str
    MaxItems: str


class ListResourceRecordSetsResponse(TypedDict, total=False):
    ResourceRecordSets: Required[List[ResourceRecordSet]]
    IsTruncated: Required[bool]
    NextRecordName: str
    NextRecordType: RRType
    NextRecordIdentifier: str
    MaxItems: Required[str]


class ListReusableDelegationSetsRequest(ServiceRequest, total=False):
    Marker: str
    MaxItems: str


class ListReusableDelegationSetsResponse(TypedDict, total=False):
    DelegationSets: Required[List[DelegationSet]]
    Marker: Required[str]
    IsTruncated: Required[bool]
    NextMarker: str
    MaxItems: Required[str]


class ListTagsForResourceRequest(ServiceRequest, total=False):
    ResourceType: Required[TagResourceType]
    ResourceId: Required[str]


class ResourceTagSet(TypedDict, total=False):
    ResourceType: TagResourceType
    ResourceId: str
    Tags: List[Tag]


class ListTagsForResourceResponse(TypedDict, total=False):
    ResourceTagSet: Required[ResourceTagSet]


class ListTagsForResourcesRequest(ServiceRequest, total=False):
    ResourceType: Required[TagResourceType]
    ResourceIds: Required[List[str]]


class ListTagsForResourcesResponse(TypedDict, total=False):
    ResourceTagSets: Required[List[ResourceTagSet]]


class ListTrafficPoliciesRequest(ServiceRequest, total=False):
    TrafficPolicyIdMarker: str
    MaxItems: str


class TrafficPolicySummary(TypedDict, total=False):
    Id: Required[str]
    Name: Required[str]
    Type: Required[RRType]
    LatestVersion: Required[int]
    TrafficPolicyCount: Required[int]


class ListTrafficPoliciesResponse(TypedDict, total=False):
    TrafficPolicySummaries: Required[List[TrafficPolicySummary]]
    IsTruncated: Required[bool]
    TrafficPolicyIdMarker: Required[str]
    MaxItems: Required[str]


class ListTrafficPolicyInstancesRequest(ServiceRequest, total=False):
    HostedZoneIdMarker: str
    TrafficPolicyInstanceNameMarker: str
    TrafficPolicyInstanceTypeMarker: RRType
    MaxItems: str


class ListTrafficPolicyInstancesResponse(TypedDict, total=False):
    TrafficPolicyInstances: Required[List[TrafficPolicyInstance]]
    HostedZoneIdMarker: str
    TrafficPolicyInstanceNameMarker: str
    TrafficPolicyInstanceTypeMarker: RRType
    IsTruncated: Required[bool]
    MaxItems: Required[str]


class ListTrafficPolicyInstancesByHostedZoneRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    TrafficPolicyInstanceNameMarker: str
    TrafficPolicyInstanceTypeMarker: RRType
    MaxItems: str


class ListTrafficPolicyInstancesByHostedZoneResponse(TypedDict, total=False):
    TrafficPolicyInstances: Required[List[TrafficPolicyInstance]]
    TrafficPolicyInstanceNameMarker: str
    TrafficPolicyInstanceTypeMarker: RRType
    IsTruncated: Required[bool]
    MaxItems: Required[str]


class ListTrafficPolicyInstancesByPolicyRequest(ServiceRequest, total=False):
    TrafficPolicyId: Required[str]
    TrafficPolicyVersion: Required[int]
    HostedZoneIdMarker: str
    TrafficPolicyInstanceNameMarker: str
    TrafficPolicyInstanceTypeMarker: RRType
    MaxItems: str


class ListTrafficPolicyInstancesByPolicyResponse(TypedDict, total=False):
    TrafficPolicyInstances: Required[List[TrafficPolicyInstance]]
    HostedZoneIdMarker: str
    TrafficPolicyInstanceNameMarker: str
    TrafficPolicyInstanceTypeMarker: RRType
    IsTruncated: Required[bool]
    MaxItems: Required[str]


class ListTrafficPolicyVersionsRequest(ServiceRequest, total=False):
    Id: Required[str]
    TrafficPolicyVersionMarker: str
    MaxItems: str


class ListTrafficPolicyVersionsResponse(TypedDict, total=False):
    TrafficPolicies: Required[List[TrafficPolicy]]
    IsTruncated: Required[bool]
    TrafficPolicyVersionMarker: Required[str]
    MaxItems: Required[str]


class ListVPCAssociationAuthorizationsRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    NextToken: str
    MaxResults: str


class ListVPCAssociationAuthorizationsResponse(TypedDict, total=False):
    HostedZoneId: Required[str]
    NextToken: str
    VPCs: Required[List[VPC]]


class TestDNSAnswerRequest(ServiceRequest, total=False):
    HostedZoneId: Required[str]
    RecordName: Required[str]
    RecordType: Required[RRType]
    ResolverIP: str
    EDNS0ClientSubnetIP: str
    EDNS0ClientSubnetMask: str


class TestDNSAnswerResponse(TypedDict, total=False):
    Nameserver: Required[str]
    RecordName: Required[str]
    RecordType: Required[RRType]
    RecordData: Required[List[str]]
    ResponseCode: Required[str]
    Protocol: Required[str]


class UpdateHealthCheckRequest(ServiceRequest, total=False):
    HealthCheckId: Required[str]
    HealthCheckVersion: int
    IPAddress: str
    Port: int
    ResourcePath: str
    FullyQualifiedDomainName: str
    SearchString: str
    FailureThreshold: int
    Inverted: bool
    Disabled: bool
    HealthThreshold: int
    ChildHealthChecks: List[str]
    EnableSNI: bool
    Regions: List[HealthCheckRegion]
    AlarmIdentifier: AlarmIdentifier
    InsufficientDataHealthStatus: InsufficientDataHealthStatus
    ResetElements: List[ResettableElementName]


class UpdateHealthCheckResponse(TypedDict, total=False):
    HealthCheck: Required[HealthCheck]


class UpdateHostedZoneCommentRequest(ServiceRequest, total=False):
    Id: Required[str]
    Comment: str


class UpdateHostedZoneCommentResponse(TypedDict, total=False):
    HostedZone: Required[HostedZone]


class UpdateTrafficPolicyCommentRequest(ServiceRequest, total=False):
    Id: Required[str]
    Version: Required[int]
    Comment: Required[str]


class UpdateTrafficPolicyCommentResponse(TypedDict, total=False):
    TrafficPolicy: Required[TrafficPolicy]


class UpdateTrafficPolicyInstanceRequest(ServiceRequest, total=False):
    Id: Required[str]
    TTL: Required[int]
    TrafficPolicyId: Required[str]
    TrafficPolicyVersion: Required[int]


class UpdateTrafficPolicyInstanceResponse(TypedDict, total=False):
    TrafficPolicyInstance: Required[TrafficPolicyInstance]


class Route53Client(ServiceClient):
    """Client of Amazon Route 53 (2013-04-01)."""

    service = "route53"
    version = "2013-04-01"
    client_name = "Amazon Route 53"
    errors = Route53Errors
    retryable_errors = RETRYABLE_ERRORS

    activate_key_signing_key = Operation(
        "ActivateKeySigningKey",
        ActivateKeySigningKeyRequest,
        ActivateKeySigningKeyResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/keysigningkey/{HostedZoneId}/{Name}/activate",
        required=("HostedZoneId", "Name"),
    )

    associate_vpc_with_hosted_zone = Operation(
        "AssociateVPCWithHostedZone",
        AssociateVPCWithHostedZoneRequest,
        AssociateVPCWithHostedZoneResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/hostedzone/{HostedZoneId}/associatevpc",
        required=("HostedZoneId",),
    )

    change_cidr_collection = Operation(
        "ChangeCidrCollection",
        ChangeCidrCollectionRequest,
        ChangeCidrCollectionResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/cidrcollection/{Id}",
        required=("Id",),
    )

    change_resource_record_sets = Operation(
        "ChangeResourceRecordSets",
        ChangeResourceRecordSetsRequest,
        ChangeResourceRecordSetsResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/hostedzone/{HostedZoneId}/rrset/",
        required=("HostedZoneId",),
    )

    change_tags_for_resource = Operation(
        "ChangeTagsForResource",
        ChangeTagsForResourceRequest,
        ChangeTagsForResourceResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/tags/{ResourceType}/{ResourceId}",
        required=("ResourceType", "ResourceId"),
    )

    create_cidr_collection = Operation(
        "CreateCidrCollection",
        CreateCidrCollectionRequest,
        CreateCidrCollectionResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/cidrcollection",
    )

    create_health_check = Operation(
        "CreateHealthCheck",
        CreateHealthCheckRequest,
        CreateHealthCheckResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/healthcheck",
    )

    create_hosted_zone = Operation(
        "CreateHostedZone",
        CreateHostedZoneRequest,
        CreateHostedZoneResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/hostedzone",
    )

    create_key_signing_key = Operation(
        "CreateKeySigningKey",
        CreateKeySigningKeyRequest,
        CreateKeySigningKeyResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/keysigningkey",
    )

    create_query_logging_config = Operation(
        "CreateQueryLoggingConfig",
        CreateQueryLoggingConfigRequest,
        CreateQueryLoggingConfigResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/queryloggingconfig",
    )

    create_reusable_delegation_set = Operation(
        "CreateReusableDelegationSet",
        CreateReusableDelegationSetRequest,
        CreateReusableDelegationSetResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/delegationset",
    )

    create_traffic_policy = Operation(
        "CreateTrafficPolicy",
        CreateTrafficPolicyRequest,
        CreateTrafficPolicyResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/trafficpolicy",
    )

    create_traffic_policy_instance = Operation(
        "CreateTrafficPolicyInstance",
        CreateTrafficPolicyInstanceRequest,
        CreateTrafficPolicyInstanceResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/trafficpolicyinstance",
    )

    create_traffic_policy_version = Operation(
        "CreateTrafficPolicyVersion",
        CreateTrafficPolicyVersionRequest,
        CreateTrafficPolicyVersionResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/trafficpolicy/{Id}",
        required=("Id",),
    )

    create_vpc_association_authorization = Operation(
        "CreateVPCAssociationAuthorization",
        CreateVPCAssociationAuthorizationRequest,
        CreateVPCAssociationAuthorizationResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/hostedzone/{HostedZoneId}/authorizevpcassociation",
        required=("HostedZoneId",),
    )

    deactivate_key_signing_key = Operation(
        "DeactivateKeySigningKey",
        DeactivateKeySigningKeyRequest,
        DeactivateKeySigningKeyResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/keysigningkey/{HostedZoneId}/{Name}/deactivate",
        required=("HostedZoneId", "Name"),
    )

    delete_cidr_collection = Operation(
        "DeleteCidrCollection",
        DeleteCidrCollectionRequest,
        DeleteCidrCollectionResponse,
        method=HttpMethod.DELETE,
        path="/2013-04-01/cidrcollection/{Id}",
        required=("Id",),
    )

    delete_health_check = Operation(
        "DeleteHealthCheck",
        DeleteHealthCheckRequest,
        DeleteHealthCheckResponse,
        method=HttpMethod.DELETE,
        path="/2013-04-01/healthcheck/{HealthCheckId}",
        required=("HealthCheckId",),
    )

    delete_hosted_zone = Operation(
        "DeleteHostedZone",
        DeleteHostedZoneRequest,
        DeleteHostedZoneResponse,
        method=HttpMethod.DELETE,
        path="/2013-04-01/hostedzone/{Id}",
        required=("Id",),
    )

    delete_key_signing_key = Operation(
        "DeleteKeySigningKey",
        DeleteKeySigningKeyRequest,
        DeleteKeySigningKeyResponse,
        method=HttpMethod.DELETE,
        path="/2013-04-01/keysigningkey/{HostedZoneId}/{Name}",
        required=("HostedZoneId", "Name"),
    )

    delete_query_logging_config = Operation(
        "DeleteQueryLoggingConfig",
        DeleteQueryLoggingConfigRequest,
        DeleteQueryLoggingConfigResponse,
        method=HttpMethod.DELETE,
        path="/2013-04-01/queryloggingconfig/{Id}",
        required=("Id",),
    )

    delete_reusable_delegation_set = Operation(
        "DeleteReusableDelegationSet",
        DeleteReusableDelegationSetRequest,
        DeleteReusableDelegationSetResponse,
        method=HttpMethod.DELETE,
        path="/2013-04-01/delegationset/{Id}",
        required=("Id",),
    )

    delete_traffic_policy = Operation(
        "DeleteTrafficPolicy",
        DeleteTrafficPolicyRequest,
        DeleteTrafficPolicyResponse,
        method=HttpMethod.DELETE,
        path="/2013-04-01/trafficpolicy/{Id}/{Version}",
        required=("Id", "Version"),
    )

    delete_traffic_policy_instance = Operation(
        "DeleteTrafficPolicyInstance",
        DeleteTrafficPolicyInstanceRequest,
        DeleteTrafficPolicyInstanceResponse,
        method=HttpMethod.DELETE,
        path="/2013-04-01/trafficpolicyinstance/{Id}",
        required=("Id",),
    )

    delete_vpc_association_authorization = Operation(
        "DeleteVPCAssociationAuthorization",
        DeleteVPCAssociationAuthorizationRequest,
        DeleteVPCAssociationAuthorizationResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/hostedzone/{HostedZoneId}/deauthorizevpcassociation",
        required=("HostedZoneId",),
    )

    disable_hosted_zone_dnssec = Operation(
        "DisableHostedZoneDNSSEC",
        DisableHostedZoneDNSSECRequest,
        DisableHostedZoneDNSSECResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/hostedzone/{HostedZoneId}/disable-dnssec",
        required=("HostedZoneId",),
    )

    disassociate_vpc_from_hosted_zone = Operation(
        "DisassociateVPCFromHostedZone",
        DisassociateVPCFromHostedZoneRequest,
        DisassociateVPCFromHostedZoneResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/hostedzone/{HostedZoneId}/disassociatevpc",
        required=("HostedZoneId",),
    )

    enable_hosted_zone_dnssec = Operation(
        "EnableHostedZoneDNSSEC",
        EnableHostedZoneDNSSECRequest,
        EnableHostedZoneDNSSECResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/hostedzone/{HostedZoneId}/enable-dnssec",
        required=("HostedZoneId",),
    )

    get_account_limit = Operation(
        "GetAccountLimit",
        GetAccountLimitRequest,
        GetAccountLimitResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/accountlimit/{Type}",
        required=("Type",),
    )

    get_change = Operation(
        "GetChange",
        GetChangeRequest,
        GetChangeResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/change/{Id}",
        required=("Id",),
    )

    get_checker_ip_ranges = Operation(
        "GetCheckerIpRanges",
        GetCheckerIpRangesRequest,
        GetCheckerIpRangesResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/checkeripranges",
    )

    get_dnssec = Operation(
        "GetDNSSEC",
        GetDNSSECRequest,
        GetDNSSECResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/hostedzone/{HostedZoneId}/dnssec",
        required=("HostedZoneId",),
    )

    get_geo_location = Operation(
        "GetGeoLocation",
        GetGeoLocationRequest,
        GetGeoLocationResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/geolocation",
    )

    get_health_check = Operation(
        "GetHealthCheck",
        GetHealthCheckRequest,
        GetHealthCheckResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/healthcheck/{HealthCheckId}",
        required=("HealthCheckId",),
    )

    get_health_check_count = Operation(
        "GetHealthCheckCount",
        GetHealthCheckCountRequest,
        GetHealthCheckCountResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/healthcheckcount",
    )

    get_health_check_last_failure_reason = Operation(
        "GetHealthCheckLastFailureReason",
        GetHealthCheckLastFailureReasonRequest,
        GetHealthCheckLastFailureReasonResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/healthcheck/{HealthCheckId}/lastfailurereason",
        required=("HealthCheckId",),
    )

    get_health_check_status = Operation(
        "GetHealthCheckStatus",
        GetHealthCheckStatusRequest,
        GetHealthCheckStatusResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/healthcheck/{HealthCheckId}/status",
        required=("HealthCheckId",),
    )

    get_hosted_zone = Operation(
        "GetHostedZone",
        GetHostedZoneRequest,
        GetHostedZoneResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/hostedzone/{Id}",
        required=("Id",),
    )

    get_hosted_zone_count = Operation(
        "GetHostedZoneCount",
        GetHostedZoneCountRequest,
        GetHostedZoneCountResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/hostedzonecount",
    )

    get_hosted_zone_limit = Operation(
        "GetHostedZoneLimit",
        GetHostedZoneLimitRequest,
        GetHostedZoneLimitResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/hostedzonelimit/{HostedZoneId}/{Type}",
        required=("Type", "HostedZoneId"),
    )

    get_query_logging_config = Operation(
        "GetQueryLoggingConfig",
        GetQueryLoggingConfigRequest,
        GetQueryLoggingConfigResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/queryloggingconfig/{Id}",
        required=("Id",),
    )

    get_reusable_delegation_set = Operation(
        "GetReusableDelegationSet",
        GetReusableDelegationSetRequest,
        GetReusableDelegationSetResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/delegationset/{Id}",
        required=("Id",),
    )

    get_reusable_delegation_set_limit = Operation(
        "GetReusableDelegationSetLimit",
        GetReusableDelegationSetLimitRequest,
        GetReusableDelegationSetLimitResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/reusabledelegationsetlimit/{DelegationSetId}/{Type}",
        required=("Type", "DelegationSetId"),
    )

    get_traffic_policy = Operation(
        "GetTrafficPolicy",
        GetTrafficPolicyRequest,
        GetTrafficPolicyResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/trafficpolicy/{Id}/{Version}",
        required=("Id", "Version"),
    )

    get_traffic_policy_instance = Operation(
        "GetTrafficPolicyInstance",
        GetTrafficPolicyInstanceRequest,
        GetTrafficPolicyInstanceResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/trafficpolicyinstance/{Id}",
        required=("Id",),
    )

    get_traffic_policy_instance_count = Operation(
        "GetTrafficPolicyInstanceCount",
        GetTrafficPolicyInstanceCountRequest,
        GetTrafficPolicyInstanceCountResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/trafficpolicyinstancecount",
    )

    list_cidr_blocks = Operation(
        "ListCidrBlocks",
        ListCidrBlocksRequest,
        ListCidrBlocksResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/cidrcollection/{CollectionId}/cidrblocks",
        required=("CollectionId",),
    )

    list_cidr_collections = Operation(
        "ListCidrCollections",
        ListCidrCollectionsRequest,
        ListCidrCollectionsResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/cidrcollection",
    )

    list_cidr_locations = Operation(
        "ListCidrLocations",
        ListCidrLocationsRequest,
        ListCidrLocationsResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/cidrcollection/{CollectionId}",
        required=("CollectionId",),
    )

    list_geo_locations = Operation(
        "ListGeoLocations",
        ListGeoLocationsRequest,
        ListGeoLocationsResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/geolocations",
    )

    list_health_checks = Operation(
        "ListHealthChecks",
        ListHealthChecksRequest,
        ListHealthChecksResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/healthcheck",
    )

    list_hosted_zones = Operation(
        "ListHostedZones",
        ListHostedZonesRequest,
        ListHostedZonesResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/hostedzone",
    )

    list_hosted_zones_by_name = Operation(
        "ListHostedZonesByName",
        ListHostedZonesByNameRequest,
        ListHostedZonesByNameResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/hostedzonesbyname",
    )

    list_hosted_zones_by_vpc = Operation(
        "ListHostedZonesByVPC",
        ListHostedZonesByVPCRequest,
        ListHostedZonesByVPCResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/hostedzonesbyvpc",
        required=("VPCId", "VPCRegion"),
    )

    list_query_logging_configs = Operation(
        "ListQueryLoggingConfigs",
        ListQueryLoggingConfigsRequest,
        ListQueryLoggingConfigsResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/queryloggingconfig",
    )

    list_resource_record_sets = Operation(
        "ListResourceRecordSets",
        ListResourceRecordSetsRequest,
        ListResourceRecordSetsResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/hostedzone/{HostedZoneId}/rrset",
        required=("HostedZoneId",),
    )

    list_reusable_delegation_sets = Operation(
        "ListReusableDelegationSets",
        ListReusableDelegationSetsRequest,
        ListReusableDelegationSetsResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/delegationset",
    )

    list_tags_for_resource = Operation(
        "ListTagsForResource",
        ListTagsForResourceRequest,
        ListTagsForResourceResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/tags/{ResourceType}/{ResourceId}",
        required=("ResourceType", "ResourceId"),
    )

    list_tags_for_resources = Operation(
        "ListTagsForResources",
        ListTagsForResourcesRequest,
        ListTagsForResourcesResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/tags/{ResourceType}",
        required=("ResourceType",),
    )

    list_traffic_policies = Operation(
        "ListTrafficPolicies",
        ListTrafficPoliciesRequest,
        ListTrafficPoliciesResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/trafficpolicies",
    )

    list_traffic_policy_instances = Operation(
        "ListTrafficPolicyInstances",
        ListTrafficPolicyInstancesRequest,
        ListTrafficPolicyInstancesResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/trafficpolicyinstances",
    )

    list_traffic_policy_instances_by_hosted_zone = Operation(
        "ListTrafficPolicyInstancesByHostedZone",
        ListTrafficPolicyInstancesByHostedZoneRequest,
        ListTrafficPolicyInstancesByHostedZoneResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/trafficpolicyinstances/hostedzone",
        required=("HostedZoneId",),
    )

    list_traffic_policy_instances_by_policy = Operation(
        "ListTrafficPolicyInstancesByPolicy",
        ListTrafficPolicyInstancesByPolicyRequest,
        ListTrafficPolicyInstancesByPolicyResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/trafficpolicyinstances/trafficpolicy",
        required=("TrafficPolicyId", "TrafficPolicyVersion"),
    )

    list_traffic_policy_versions = Operation(
        "ListTrafficPolicyVersions",
        ListTrafficPolicyVersionsRequest,
        ListTrafficPolicyVersionsResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/trafficpolicies/{Id}/versions",
        required=("Id",),
    )

    list_vpc_association_authorizations = Operation(
        "ListVPCAssociationAuthorizations",
        ListVPCAssociationAuthorizationsRequest,
        ListVPCAssociationAuthorizationsResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/hostedzone/{HostedZoneId}/authorizevpcassociation",
        required=("HostedZoneId",),
    )

    test_dns_answer = Operation(
        "TestDNSAnswer",
        TestDNSAnswerRequest,
        TestDNSAnswerResponse,
        method=HttpMethod.GET,
        path="/2013-04-01/testdnsanswer",
        required=("HostedZoneId", "RecordName", "RecordType"),
    )

    update_health_check = Operation(
        "UpdateHealthCheck",
        UpdateHealthCheckRequest,
        UpdateHealthCheckResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/healthcheck/{HealthCheckId}",
        required=("HealthCheckId",),
    )

    update_hosted_zone_comment = Operation(
        "UpdateHostedZoneComment",
        UpdateHostedZoneCommentRequest,
        UpdateHostedZoneCommentResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/hostedzone/{Id}",
        required=("Id",),
    )

    update_traffic_policy_comment = Operation(
        "UpdateTrafficPolicyComment",
        UpdateTrafficPolicyCommentRequest,
        UpdateTrafficPolicyCommentResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/trafficpolicy/{Id}/{Version}",
        required=("Id", "Version"),
    )

    update_traffic_policy_instance = Operation(
        "UpdateTrafficPolicyInstance",
        UpdateTrafficPolicyInstanceRequest,
        UpdateTrafficPolicyInstanceResponse,
        method=HttpMethod.POST,
        path="/2013-04-01/trafficpolicyinstance/{Id}",
        required=("Id",),
    )
