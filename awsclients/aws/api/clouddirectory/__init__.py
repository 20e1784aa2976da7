from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Required, TypedDict

from awsclients.aws.api.core import HttpMethod, ServiceRequest, SignerType
from awsclients.aws.service import Operation, ServiceClient

BatchReadExceptionType = Literal["ValidationException", "InvalidArnException", "ResourceNotFoundException", "InvalidNextTokenException", "AccessDeniedException", "NotNodeException", "FacetValidationException", "CannotListParentOfRootException", "NotIndexException", "NotPolicyException", "DirectoryNotEnabledException", "LimitExceededException", "InternalServiceException"]
ConsistencyLevel = Literal["SERIALIZABLE", "EVENTUAL"]
DirectoryState = Literal["ENABLED", "DISABLED", "DELETED"]
FacetAttributeType = Literal["STRING", "BINARY", "BOOLEAN", "NUMBER", "DATETIME", "VARIANT"]
FacetStyle = Literal["STATIC", "DYNAMIC"]
ObjectType = Literal["NODE", "LEAF_NODE", "POLICY", "INDEX"]
RangeMode = Literal["FIRST", "LAST", "LAST_BEFORE_MISSING_VALUES", "INCLUSIVE", "EXCLUSIVE"]
RequiredAttributeBehavior = Literal["REQUIRED_ALWAYS", "NOT_REQUIRED"]
RuleType = Literal["BINARY_LENGTH", "NUMBER_COMPARISON", "STRING_FROM_SET", "STRING_LENGTH"]
UpdateActionType = Literal["CREATE_OR_UPDATE", "DELETE"]


class CloudDirectoryErrors(str, Enum):
    ACCESS_DENIED = "AccessDeniedException"
    BATCH_WRITE = "BatchWriteException"
    CANNOT_LIST_PARENT_OF_ROOT = "CannotListParentOfRootException"
    DIRECTORY_ALREADY_EXISTS = "DirectoryAlreadyExistsException"
    DIRECTORY_DELETED = "DirectoryDeletedException"
    DIRECTORY_NOT_DISABLED = "DirectoryNotDisabledException"
    DIRECTORY_NOT_ENABLED = "DirectoryNotEnabledException"
    FACET_ALREADY_EXISTS = "FacetAlreadyExistsException"
    FACET_IN_USE = "FacetInUseException"
    FACET_NOT_FOUND = "FacetNotFoundException"
    FACET_VALIDATION = "FacetValidationException"
    INCOMPATIBLE_SCHEMA = "IncompatibleSchemaException"
    INDEXED_ATTRIBUTE_MISSING = "IndexedAttributeMissingException"
    INTERNAL_SERVICE = "InternalServiceException"
    INVALID_ARN = "InvalidArnException"
    INVALID_ATTACHMENT = "InvalidAttachmentException"
    INVALID_FACET_UPDATE = "InvalidFacetUpdateException"
    INVALID_NEXT_TOKEN = "InvalidNextTokenException"
    INVALID_RULE = "InvalidRuleException"
    INVALID_SCHEMA_DOC = "InvalidSchemaDocException"
    INVALID_TAGGING_REQUEST = "InvalidTaggingRequestException"
    LIMIT_EXCEEDED = "LimitExceededException"
    LINK_NAME_ALREADY_IN_USE = "LinkNameAlreadyInUseException"
    NOT_INDEX = "NotIndexException"
    NOT_NODE = "NotNodeException"
    NOT_POLICY = "NotPolicyException"
    OBJECT_ALREADY_DETACHED = "ObjectAlreadyDetachedException"
    OBJECT_NOT_DETACHED = "ObjectNotDetachedException"
    RESOURCE_NOT_FOUND = "ResourceNotFoundException"
    RETRYABLE_CONFLICT = "RetryableConflictException"
    SCHEMA_ALREADY_EXISTS = "SchemaAlreadyExistsException"
    SCHEMA_ALREADY_PUBLISHED = "SchemaAlreadyPublishedException"
    STILL_CONTAINS_LINKS = "StillContainsLinksException"
    UNSUPPORTED_INDEX_TYPE = "UnsupportedIndexTypeException"
    VALIDATION = "ValidationException"


RETRYABLE_ERRORS = frozenset()


class SchemaFacet(TypedDict, total=False):
    SchemaArn: str
    FacetName: str


class AttributeKey(TypedDict, total=False):
    SchemaArn: Required[str]
    FacetName: Required[str]
    Name: Required[str]


class TypedAttributeValue(TypedDict, total=False):
    StringValue: str
    BinaryValue: bytes
    BooleanValue: bool
    NumberValue: str
    DatetimeValue: datetime


class AttributeKeyAndValue(TypedDict, total=False):
    Key: Required[AttributeKey]
    Value: Required[TypedAttributeValue]


class ObjectReference(TypedDict, total=False):
    Selector: str


class AddFacetToObjectRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    SchemaFacet: Required[SchemaFacet]
    ObjectAttributeList: List[AttributeKeyAndValue]
    ObjectReference: Required[ObjectReference]


class AddFacetToObjectResponse(TypedDict, total=False):
    pass


class ApplySchemaRequest(ServiceRequest, total=False):
    PublishedSchemaArn: Required[str]
    DirectoryArn: Required[str]


class ApplySchemaResponse(TypedDict, total=False):
    AppliedSchemaArn: str
    DirectoryArn: str


class AttachObjectRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ParentReference: Required[ObjectReference]
    ChildReference: Required[ObjectReference]
    LinkName: Required[str]


class AttachObjectResponse(TypedDict, total=False):
    AttachedObjectIdentifier: str


class AttachPolicyRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    PolicyReference: Required[ObjectReference]
    ObjectReference: Required[ObjectReference]


class AttachPolicyResponse(TypedDict, total=False):
    pass


class AttachToIndexRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    IndexReference: Required[ObjectReference]
    TargetReference: Required[ObjectReference]


class AttachToIndexResponse(TypedDict, total=False):
    AttachedObjectIdentifier: str


class TypedLinkSchemaAndFacetName(TypedDict, total=False):
    SchemaArn: Required[str]
    TypedLinkName: Required[str]


class AttributeNameAndValue(TypedDict, total=False):
    AttributeName: Required[str]
    Value: Required[TypedAttributeValue]


class AttachTypedLinkRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    SourceObjectReference: Required[ObjectReference]
    TargetObjectReference: Required[ObjectReference]
    TypedLinkFacet: Required[TypedLinkSchemaAndFacetName]
    Attributes: Required[List[AttributeNameAndValue]]


class TypedLinkSpecifier(TypedDict, total=False):
    TypedLinkFacet: Required[TypedLinkSchemaAndFacetName]
    SourceObjectReference: Required[ObjectReference]
    TargetObjectReference: Required[ObjectReference]
    IdentityAttributeValues: Required[List[AttributeNameAndValue]]


class AttachTypedLinkResponse(TypedDict, total=False):
    TypedLinkSpecifier: TypedLinkSpecifier


class BatchListObjectAttributes(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int
    FacetFilter: SchemaFacet


class BatchListObjectChildren(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int


class BatchListAttachedIndices(TypedDict, total=False):
    TargetReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int


class BatchListObjectParentPaths(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int


class BatchGetObjectInformation(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]


class BatchGetObjectAttributes(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]
    SchemaFacet: Required[SchemaFacet]
    AttributeNames: Required[List[str]]


class BatchListObjectParents(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int


class BatchListObjectPolicies(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int


class BatchListPolicyAttachments(TypedDict, total=False):
    PolicyReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int


class BatchLookupPolicy(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int


class TypedAttributeValueRange(TypedDict, total=False):
    StartMode: Required[RangeMode]
    StartValue: TypedAttributeValue
    EndMode: Required[RangeMode]
    EndValue: TypedAttributeValue


class ObjectAttributeRange(TypedDict, total=False):
    AttributeKey: AttributeKey
    Range: TypedAttributeValueRange


class BatchListIndex(TypedDict, total=False):
    RangesOnIndexedValues: List[ObjectAttributeRange]
    IndexReference: Required[ObjectReference]
    MaxResults: int
    NextToken: str


class TypedLinkAttributeRange(TypedDict, total=False):
    AttributeName: str
    Range: Required[TypedAttributeValueRange]


class BatchListOutgoingTypedLinks(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]
    FilterAttributeRanges: List[TypedLinkAttributeRange]
    FilterTypedLink: TypedLinkSchemaAndFacetName
    NextToken: str
    MaxResults: int


class BatchListIncomingTypedLinks(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]
    FilterAttributeRanges: List[TypedLinkAttributeRange]
    FilterTypedLink: TypedLinkSchemaAndFacetName
    NextToken: str
    MaxResults: int


class BatchGetLinkAttributes(TypedDict, total=False):
    TypedLinkSpecifier: Required[TypedLinkSpecifier]
    AttributeNames: Required[List[str]]


class BatchReadOperation(TypedDict, total=False):
    ListObjectAttributes: BatchListObjectAttributes
    ListObjectChildren: BatchListObjectChildren
    ListAttachedIndices: BatchListAttachedIndices
    ListObjectParentPaths: BatchListObjectParentPaths
    GetObjectInformation: BatchGetObjectInformation
    GetObjectAttributes: BatchGetObjectAttributes
    ListObjectParents: BatchListObjectParents
    ListObjectPolicies: BatchListObjectPolicies
    ListPolicyAttachments: BatchListPolicyAttachments
    LookupPolicy: BatchLookupPolicy
    ListIndex: BatchListIndex
    ListOutgoingTypedLinks: BatchListOutgoingTypedLinks
    ListIncomingTypedLinks: BatchListIncomingTypedLinks
    GetLinkAttributes: BatchGetLinkAttributes


class BatchReadRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    Operations: Required[List[BatchReadOperation]]
    ConsistencyLevel: ConsistencyLevel


class BatchListObjectAttributesResponse(TypedDict, total=False):
    Attributes: List[AttributeKeyAndValue]
    NextToken: str


class BatchListObjectChildrenResponse(TypedDict, total=False):
    Children: Dict[str, str]
    NextToken: str


class BatchGetObjectInformationResponse(TypedDict, total=False):
    SchemaFacets: List[SchemaFacet]
    ObjectIdentifier: str


class BatchGetObjectAttributesResponse(TypedDict, total=False):
    Attributes: List[AttributeKeyAndValue]


class IndexAttachment(TypedDict, total=False):
    IndexedAttributes: List[AttributeKeyAndValue]
    ObjectIdentifier: str


class BatchListAttachedIndicesResponse(TypedDict, total=False):
    IndexAttachments: List[IndexAttachment]
    NextToken: str


class PathToObjectIdentifiers(TypedDict, total=False):
    Path: str
    ObjectIdentifiers: List[str]


class BatchListObjectParentPathsResponse(TypedDict, total=False):
    PathToObjectIdentifiersList: List[PathToObjectIdentifiers]
    NextToken: str


class BatchListObjectPoliciesResponse(TypedDict, total=False):
    AttachedPolicyIds: List[str]
    NextToken: str


class BatchListPolicyAttachmentsResponse(TypedDict, total=False):
    ObjectIdentifiers: List[str]
    NextToken: str


class PolicyAttachment(TypedDict, total=False):
    PolicyId: str
    ObjectIdentifier: str
    PolicyType: str


class PolicyToPath(TypedDict, total=False):
    Path: str
    Policies: List[PolicyAttachment]


class BatchLookupPolicyResponse(TypedDict, total=False):
    PolicyToPathList: List[PolicyToPath]
    NextToken: str


class BatchListIndexResponse(TypedDict, total=False):
    IndexAttachments: List[IndexAttachment]
    NextToken: str


class BatchListOutgoingTypedLinksResponse(TypedDict, total=False):
    TypedLinkSpecifiers: List[TypedLinkSpecifier]
    NextToken: str


class BatchListIncomingTypedLinksResponse(TypedDict, total=False):
    LinkSpecifiers: List[TypedLinkSpecifier]
    NextToken: str


class BatchGetLinkAttributesResponse(TypedDict, total=False):
    Attributes: List[AttributeKeyAndValue]


class ObjectIdentifierAndLinkNameTuple(TypedDict, total=False):
    ObjectIdentifier: str
    LinkName: str


class BatchListObjectParentsResponse(TypedDict, total=False):
    ParentLinks: List[ObjectIdentifierAndLinkNameTuple]
    NextToken: str


class BatchReadSuccessfulResponse(TypedDict, total=False):
    ListObjectAttributes: BatchListObjectAttributesResponse
    ListObjectChildren: BatchListObjectChildrenResponse
    GetObjectInformation: BatchGetObjectInformationResponse
    GetObjectAttributes: BatchGetObjectAttributesResponse
    ListAttachedIndices: BatchListAttachedIndicesResponse
    ListObjectParentPaths: BatchListObjectParentPathsResponse
    ListObjectPolicies: BatchListObjectPoliciesResponse
    ListPolicyAttachments: BatchListPolicyAttachmentsResponse
    LookupPolicy: BatchLookupPolicyResponse
    ListIndex: BatchListIndexResponse
    ListOutgoingTypedLinks: BatchListOutgoingTypedLinksResponse
    ListIncomingTypedLinks: BatchListIncomingTypedLinksResponse
    GetLinkAttributes: BatchGetLinkAttributesResponse
    ListObjectParents: BatchListObjectParentsResponse


class BatchReadException(TypedDict, total=False):
    Type: BatchReadExceptionType
    Message: str


class BatchReadOperationResponse(TypedDict, total=False):
    SuccessfulResponse: BatchReadSuccessfulResponse
    ExceptionResponse: BatchReadException


class BatchReadResponse(TypedDict, total=False):
    Responses: List[BatchReadOperationResponse]


class BatchCreateObject(TypedDict, total=False):
    SchemaFacet: Required[List[SchemaFacet]]
    ObjectAttributeList: Required[List[AttributeKeyAndValue]]
    ParentReference: ObjectReference
    LinkName: str
    BatchReferenceName: str


class BatchAttachObject(TypedDict, total=False):
    ParentReference: Required[ObjectReference]
    ChildReference: Required[ObjectReference]
    LinkName: Required[str]


class BatchDetachObject(TypedDict, total=False):
    ParentReference: Required[ObjectReference]
    LinkName: Required[str]
    BatchReferenceName: str


class ObjectAttributeAction(TypedDict, total=False):
    ObjectAttributeActionType: UpdateActionType
    ObjectAttributeUpdateValue: TypedAttributeValue


class ObjectAttributeUpdate(TypedDict, total=False):
    ObjectAttributeKey: AttributeKey
    ObjectAttributeAction: ObjectAttributeAction


class BatchUpdateObjectAttributes(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]
    AttributeUpdates: Required[List[ObjectAttributeUpdate]]


class BatchDeleteObject(TypedDict, total=False):
    ObjectReference: Required[ObjectReference]


class BatchAddFacetToObject(TypedDict, total=False):
    SchemaFacet: Required[SchemaFacet]
    ObjectAttributeList: Required[List[AttributeKeyAndValue]]
    ObjectReference: Required[ObjectReference]


class BatchRemoveFacetFromObject(TypedDict, total=False):
    SchemaFacet: Required[SchemaFacet]
    ObjectReference: Required[ObjectReference]


class BatchAttachPolicy(TypedDict, total=False):
    PolicyReference: Required[ObjectReference]
    ObjectReference: Required[ObjectReference]


class BatchDetachPolicy(TypedDict, total=False):
    PolicyReference: Required[ObjectReference]
    ObjectReference: Required[ObjectReference]


class BatchCreateIndex(TypedDict, total=False):
    OrderedIndexedAttributeList: Required[List[AttributeKey]]
    IsUnique: Required[bool]
    ParentReference: ObjectReference
    LinkName: str
    BatchReferenceName: str


class BatchAttachToIndex(TypedDict, total=False):
    IndexReference: Required[ObjectReference]
    TargetReference: Required[ObjectReference]


class BatchDetachFromIndex(TypedDict, total=False):
    IndexReference: Required[ObjectReference]
    TargetReference: Required[ObjectReference]


class BatchAttachTypedLink(TypedDict, total=False):
    SourceObjectReference: Required[ObjectReference]
    TargetObjectReference: Required[ObjectReference]
    TypedLinkFacet: Required[TypedLinkSchemaAndFacetName]
    Attributes: Required[List[AttributeNameAndValue]]


class BatchDetachTypedLink(TypedDict, total=False):
    TypedLinkSpecifier: Required[TypedLinkSpecifier]


class LinkAttributeAction(TypedDict, total=False):
    AttributeActionType: UpdateActionType
    AttributeUpdateValue: TypedAttributeValue


class LinkAttributeUpdate(TypedDict, total=False):
    AttributeKey: AttributeKey
    AttributeAction: LinkAttributeAction


class BatchUpdateLinkAttributes(TypedDict, total=False):
    TypedLinkSpecifier: Required[TypedLinkSpecifier]
    AttributeUpdates: Required[List[LinkAttributeUpdate]]


class BatchWriteOperation(TypedDict, total=False):
    CreateObject: BatchCreateObject
    AttachObject: BatchAttachObject
    DetachObject: BatchDetachObject
    UpdateObjectAttributes: BatchUpdateObjectAttributes
    DeleteObject: BatchDeleteObject
    AddFacetToObject: BatchAddFacetToObject
    RemoveFacetFromObject: BatchRemoveFacetFromObject
    AttachPolicy: BatchAttachPolicy
    DetachPolicy: BatchDetachPolicy
    CreateIndex: BatchCreateIndex
    AttachToIndex: BatchAttachToIndex
    DetachFromIndex: BatchDetachFromIndex
    AttachTypedLink: BatchAttachTypedLink
    DetachTypedLink: BatchDetachTypedLink
    UpdateLinkAttributes: BatchUpdateLinkAttributes


class BatchWriteRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    Operations: Required[List[BatchWriteOperation]]


class BatchCreateObjectResponse(TypedDict, total=False):
    ObjectIdentifier: str


class BatchAttachObjectResponse(TypedDict, total=False):
    attachedObjectIdentifier: str


class BatchDetachObjectResponse(TypedDict, total=False):
    detachedObjectIdentifier: str


class BatchUpdateObjectAttributesResponse(TypedDict, total=False):
    ObjectIdentifier: str


class BatchDeleteObjectResponse(TypedDict, total=False):
    pass


class BatchAddFacetToObjectResponse(TypedDict, total=False):
    pass


class BatchRemoveFacetFromObjectResponse(TypedDict, total=False):
    pass


class BatchAttachPolicyResponse(TypedDict, total=False):
    pass


class BatchDetachPolicyResponse(TypedDict, total=False):
    pass


class BatchCreateIndexResponse(TypedDict, total=False):
    ObjectIdentifier: str


class BatchAttachToIndexResponse(TypedDict, total=False):
    AttachedObjectIdentifier: str


class BatchDetachFromIndexResponse(TypedDict, total=False):
    DetachedObjectIdentifier: str


class BatchAttachTypedLinkResponse(TypedDict, total=False):
    TypedLinkSpecifier: TypedLinkSpecifier


class BatchDetachTypedLinkResponse(TypedDict, total=False):
    pass


class BatchUpdateLinkAttributesResponse(TypedDict, total=False):
    pass


class BatchWriteOperationResponse(TypedDict, total=False):
    CreateObject: BatchCreateObjectResponse
    AttachObject: BatchAttachObjectResponse
    DetachObject: BatchDetachObjectResponse
    UpdateObjectAttributes: BatchUpdateObjectAttributesResponse
    DeleteObject: BatchDeleteObjectResponse
    AddFacetToObject: BatchAddFacetToObjectResponse
    RemoveFacetFromObject: BatchRemoveFacetFromObjectResponse
    AttachPolicy: BatchAttachPolicyResponse
    DetachPolicy: BatchDetachPolicyResponse
    CreateIndex: BatchCreateIndexResponse
    AttachToIndex: BatchAttachToIndexResponse
    DetachFromIndex: BatchDetachFromIndexResponse
    AttachTypedLink: BatchAttachTypedLinkResponse
    DetachTypedLink: BatchDetachTypedLinkResponse
    UpdateLinkAttributes: BatchUpdateLinkAttributesResponse


class BatchWriteResponse(TypedDict, total=False):
    Responses: List[BatchWriteOperationResponse]


class CreateDirectoryRequest(ServiceRequest, total=False):
    Name: Required[str]
    SchemaArn: Required[str]


class CreateDirectoryResponse(TypedDict, total=False):
    DirectoryArn: Required[str]
    Name: Required[str]
    ObjectIdentifier: Required[str]
    AppliedSchemaArn: Required[str]


class Rule(TypedDict, total=False):
    Type: RuleType
    Parameters: Dict[str, str]


class FacetAttributeDefinition(TypedDict, total=False):
    Type: Required[FacetAttributeType]
    DefaultValue: TypedAttributeValue
    IsImmutable: bool
    Rules: Dict[str, Rule]


class FacetAttributeReference(TypedDict, total=False):
    TargetFacetName: Required[str]
    TargetAttributeName: Required[str]


class FacetAttribute(TypedDict, total=False):
    Name: Required[str]
    AttributeDefinition: FacetAttributeDefinition
    AttributeReference: FacetAttributeReference
    RequiredBehavior: RequiredAttributeBehavior


class CreateFacetRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Name: Required[str]
    Attributes: List[FacetAttribute]
    ObjectType: ObjectType
    FacetStyle: FacetStyle


class CreateFacetResponse(TypedDict, total=False):
    pass


class CreateIndexRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    OrderedIndexedAttributeList: Required[List[AttributeKey]]
    IsUnique: Required[bool]
    ParentReference: ObjectReference
    LinkName: str


class CreateIndexResponse(TypedDict, total=False):
    ObjectIdentifier: str


class CreateObjectRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    SchemaFacets: Required[List[SchemaFacet]]
    ObjectAttributeList: List[AttributeKeyAndValue]
    ParentReference: ObjectReference
    LinkName: str


class CreateObjectResponse(TypedDict, total=False):
    ObjectIdentifier: str


class CreateSchemaRequest(ServiceRequest, total=False):
    Name: Required[str]


class CreateSchemaResponse(TypedDict, total=False):
    SchemaArn: str


class TypedLinkAttributeDefinition(TypedDict, total=False):
    Name: Required[str]
    Type: Required[FacetAttributeType]
    DefaultValue: TypedAttributeValue
    IsImmutable: bool
    Rules: Dict[str, Rule]
    RequiredBehavior: Required[RequiredAttributeBehavior]


class TypedLinkFacet(TypedDict, total=False):
    Name: Required[str]
    Attributes: Required[List[TypedLinkAttributeDefinition]]
    IdentityAttributeOrder: Required[List[str]]


class CreateTypedLinkFacetRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Facet: Required[TypedLinkFacet]


class CreateTypedLinkFacetResponse(TypedDict, total=False):
    pass


class DeleteDirectoryRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]


class DeleteDirectoryResponse(TypedDict, total=False):
    DirectoryArn: Required[str]


class DeleteFacetRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Name: Required[str]


class DeleteFacetResponse(TypedDict, total=False):
    pass


class DeleteObjectRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]


class DeleteObjectResponse(TypedDict, total=False):
    pass


class DeleteSchemaRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]


class DeleteSchemaResponse(TypedDict, total=False):
    SchemaArn: str


class DeleteTypedLinkFacetRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Name: Required[str]


class DeleteTypedLinkFacetResponse(TypedDict, total=False):
    pass


class DetachFromIndexRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    IndexReference: Required[ObjectReference]
    TargetReference: Required[ObjectReference]


class DetachFromIndexResponse(TypedDict, total=False):
    DetachedObjectIdentifier: str


class DetachObjectRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ParentReference: Required[ObjectReference]
    LinkName: Required[str]


class DetachObjectResponse(TypedDict, total=False):
    DetachedObjectIdentifier: str


class DetachPolicyRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    PolicyReference: Required[ObjectReference]
    ObjectReference: Required[ObjectReference]


class DetachPolicyResponse(TypedDict, total=False):
    pass


class DetachTypedLinkRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    TypedLinkSpecifier: Required[TypedLinkSpecifier]


class DisableDirectoryRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]


class DisableDirectoryResponse(TypedDict, total=False):
    DirectoryArn: Required[str]


class EnableDirectoryRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]


class EnableDirectoryResponse(TypedDict, total=False):
    DirectoryArn: Required[str]


class GetAppliedSchemaVersionRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]


class GetAppliedSchemaVersionResponse(TypedDict, total=False):
    AppliedSchemaArn: str


class GetDirectoryRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]


class Directory(TypedDict, total=False):
    Name: str
    DirectoryArn: str
    State: DirectoryState
    CreationDateTime: datetime


class GetDirectoryResponse(TypedDict, total=False):
    Directory: Required[Directory]


class GetFacetRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Name: Required[str]


class Facet(TypedDict, total=False):
    Name: str
    ObjectType: ObjectType
    FacetStyle: FacetStyle


class GetFacetResponse(TypedDict, total=False):
    Facet: Facet


class GetLinkAttributesRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    TypedLinkSpecifier: Required[TypedLinkSpecifier]
    AttributeNames: Required[List[str]]
    ConsistencyLevel: ConsistencyLevel


class GetLinkAttributesResponse(TypedDict, total=False):
    Attributes: List[AttributeKeyAndValue]


class GetObjectAttributesRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]
    ConsistencyLevel: ConsistencyLevel
    SchemaFacet: Required[SchemaFacet]
    AttributeNames: Required[List[str]]


class GetObjectAttributesResponse(TypedDict, total=False):
    Attributes: List[AttributeKeyAndValue]


class GetObjectInformationRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]
    ConsistencyLevel: ConsistencyLevel


class GetObjectInformationResponse(TypedDict, total=False):
    SchemaFacets: List[SchemaFacet]
    ObjectIdentifier: str


class GetSchemaAsJsonRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]


class GetSchemaAsJsonResponse(TypedDict, total=False):
    Name: str
    Document: str


class GetTypedLinkFacetInformationRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Name: Required[str]


class GetTypedLinkFacetInformationResponse(TypedDict, total=False):
    IdentityAttributeOrder: List[str]


class ListAppliedSchemaArnsRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    SchemaArn: str
    NextToken: str
    MaxResults: int


class ListAppliedSchemaArnsResponse(TypedDict, total=False):
    SchemaArns: List[str]
    NextToken: str


class ListAttachedIndicesRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    TargetReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int
    ConsistencyLevel: ConsistencyLevel


class ListAttachedIndicesResponse(TypedDict, total=False):
    IndexAttachments: List[IndexAttachment]
    NextToken: str


class ListDevelopmentSchemaArnsRequest(ServiceRequest, total=False):
    NextToken: str
    MaxResults: int


class ListDevelopmentSchemaArnsResponse(TypedDict, total=False):
    SchemaArns: List[str]
    NextToken: str


class ListDirectoriesRequest(ServiceRequest, total=False):
    NextToken: str
    MaxResults: int
    state: DirectoryState


class ListDirectoriesResponse(TypedDict, total=False):
    Directories: Required[List[Directory]]
    NextToken: str


class ListFacetAttributesRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Name: Required[str]
    NextToken: str
    MaxResults: int


class ListFacetAttributesResponse(TypedDict, total=False):
    Attributes: List[FacetAttribute]
    NextToken: str


class ListFacetNamesRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    NextToken: str
    MaxResults: int


class ListFacetNamesResponse(TypedDict, total=False):
    FacetNames: List[str]
    NextToken: str


class ListIncomingTypedLinksRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]
    FilterAttributeRanges: List[TypedLinkAttributeRange]
    FilterTypedLink: TypedLinkSchemaAndFacetName
    NextToken: str
    MaxResults: int
    ConsistencyLevel: ConsistencyLevel


class ListIncomingTypedLinksResponse(TypedDict, total=False):
    LinkSpecifiers: List[TypedLinkSpecifier]
    NextToken: str


class ListIndexRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    RangesOnIndexedValues: List[ObjectAttributeRange]
    IndexReference: Required[ObjectReference]
    MaxResults: int
    NextToken: str
    ConsistencyLevel: ConsistencyLevel


class ListIndexResponse(TypedDict, total=False):
    IndexAttachments: List[IndexAttachment]
    NextToken: str


class ListManagedSchemaArnsRequest(ServiceRequest, total=False):
    SchemaArn: str
    NextToken: str
    MaxResults: int


class ListManagedSchemaArnsResponse(TypedDict, total=False):
    SchemaArns: List[str]
    NextToken: str


class ListObjectAttributesRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int
    ConsistencyLevel: ConsistencyLevel
    FacetFilter: SchemaFacet


class ListObjectAttributesResponse(TypedDict, total=False):
    Attributes: List[AttributeKeyAndValue]
    NextToken: str


class ListObjectChildrenRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int
    ConsistencyLevel: ConsistencyLevel


class ListObjectChildrenResponse(TypedDict, total=False):
    Children: Dict[str, str]
    NextToken: str


class ListObjectParentPathsRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int


class ListObjectParentPathsResponse(TypedDict, total=False):
    PathToObjectIdentifiersList: List[PathToObjectIdentifiers]
    NextToken: str


class ListObjectParentsRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int
    ConsistencyLevel: ConsistencyLevel
    IncludeAllLinksToEachParent: bool


class ListObjectParentsResponse(TypedDict, total=False):
    Parents: Dict[str, str]
    NextToken: str
    ParentLinks: List[ObjectIdentifierAndLinkNameTuple]


class ListObjectPoliciesRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int
    ConsistencyLevel: ConsistencyLevel


class ListObjectPoliciesResponse(TypedDict, total=False):
    AttachedPolicyIds: List[str]
    NextToken: str


class ListOutgoingTypedLinksRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]
    FilterAttributeRanges: List[TypedLinkAttributeRange]
    FilterTypedLink: TypedLinkSchemaAndFacetName
    NextToken: str
    MaxResults: int
    ConsistencyLevel: ConsistencyLevel


class ListOutgoingTypedLinksResponse(TypedDict, total=False):
    TypedLinkSpecifiers: List[TypedLinkSpecifier]
    NextToken: str


class ListPolicyAttachmentsRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    PolicyReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int
    ConsistencyLevel: ConsistencyLevel


class ListPolicyAttachmentsResponse(TypedDict, total=False):
    ObjectIdentifiers: List[str]
    NextToken: str


class ListPublishedSchemaArnsRequest(ServiceRequest, total=False):
    SchemaArn: str
    NextToken: str
    MaxResults: int


class ListPublishedSchemaArnsResponse(TypedDict, total=False):
    SchemaArns: List[str]
    NextToken: str


class ListTagsForResourceRequest(ServiceRequest, total=False):
    ResourceArn: Required[str]
    NextToken: str
    MaxResults: int


class Tag(TypedDict, total=False):
    Key: str
    Value: str


class ListTagsForResourceResponse(TypedDict, total=False):
    Tags: List[Tag]
    NextToken: str


class ListTypedLinkFacetAttributesRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Name: Required[str]
    NextToken: str
    MaxResults: int


class ListTypedLinkFacetAttributesResponse(TypedDict, total=False):
    Attributes: List[TypedLinkAttributeDefinition]
    NextToken: str


class ListTypedLinkFacetNamesRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    NextToken: str
    MaxResults: int


class ListTypedLinkFacetNamesResponse(TypedDict, total=False):
    FacetNames: List[str]
    NextToken: str


class LookupPolicyRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]
    NextToken: str
    MaxResults: int


class LookupPolicyResponse(TypedDict, total=False):
    PolicyToPathList: List[PolicyToPath]
    NextToken: str


class PublishSchemaRequest(ServiceRequest, total=False):
    DevelopmentSchemaArn: Required[str]
    Version: Required[str]
    MinorVersion: str
    Name: str


class PublishSchemaResponse(TypedDict, total=False):
    PublishedSchemaArn: str


class PutSchemaFromJsonRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Document: Required[str]


class PutSchemaFromJsonResponse(TypedDict, total=False):
    Arn: str


class RemoveFacetFromObjectRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    SchemaFacet: Required[SchemaFacet]
    ObjectReference: Required[ObjectReference]


class RemoveFacetFromObjectResponse(TypedDict, total=False):
    pass


class TagResourceRequest(ServiceRequest, total=False):
    ResourceArn: Required[str]
    Tags: Required[List[Tag]]


class TagResourceResponse(TypedDict, total=False):
    pass


class UntagResourceRequest(ServiceRequest, total=False):
    ResourceArn: Required[str]
    TagKeys: Required[List[str]]


class UntagResourceResponse(TypedDict, total=False):
    pass


class FacetAttributeUpdate(TypedDict, total=False):
    Attribute: FacetAttribute
    Action: UpdateActionType


class UpdateFacetRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Name: Required[str]
    AttributeUpdates: List[FacetAttributeUpdate]
    ObjectType: ObjectType


class UpdateFacetResponse(TypedDict, total=False):
    pass


class UpdateLinkAttributesRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    TypedLinkSpecifier: Required[TypedLinkSpecifier]
    AttributeUpdates: Required[List[LinkAttributeUpdate]]


class UpdateLinkAttributesResponse(TypedDict, total=False):
    pass


class UpdateObjectAttributesRequest(ServiceRequest, total=False):
    DirectoryArn: Required[str]
    ObjectReference: Required[ObjectReference]
    AttributeUpdates: Required[List[ObjectAttributeUpdate]]


class UpdateObjectAttributesResponse(TypedDict, total=False):
    ObjectIdentifier: str


class UpdateSchemaRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Name: Required[str]


class UpdateSchemaResponse(TypedDict, total=False):
    SchemaArn: str


class TypedLinkFacetAttributeUpdate(TypedDict, total=False):
    Attribute: Required[TypedLinkAttributeDefinition]
    Action: Required[UpdateActionType]


class UpdateTypedLinkFacetRequest(ServiceRequest, total=False):
    SchemaArn: Required[str]
    Name: Required[str]
    AttributeUpdates: Required[List[TypedLinkFacetAttributeUpdate]]
    IdentityAttributeOrder: Required[List[str]]


class UpdateTypedLinkFacetResponse(TypedDict, total=False):
    pass


class UpgradeAppliedSchemaRequest(ServiceRequest, total=False):
    PublishedSchemaArn: Required[str]
    DirectoryArn: Required[str]
    DryRun: bool


class UpgradeAppliedSchemaResponse(TypedDict, total=False):
    UpgradedSchemaArn: str
    DirectoryArn: str


class UpgradePublishedSchemaRequest(ServiceRequest, total=False):
    DevelopmentSchemaArn: Required[str]
    PublishedSchemaArn: Required[str]
    MinorVersion: Required[str]
    DryRun: bool


class UpgradePublishedSchemaResponse(TypedDict, total=False):
    UpgradedSchemaArn: str


class CloudDirectoryClient(ServiceClient):
    """Client of Amazon CloudDirectory (2017-01-11)."""

    service = "clouddirectory"
    version = "2017-01-11"
    client_name = "Amazon CloudDirectory"
    errors = CloudDirectoryErrors
    retryable_errors = RETRYABLE_ERRORS

    add_facet_to_object = Operation(
        "AddFacetToObject",
        AddFacetToObjectRequest,
        AddFacetToObjectResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/object/facets",
        required=("DirectoryArn",),
    )

    apply_schema = Operation(
        "ApplySchema",
        ApplySchemaRequest,
        ApplySchemaResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/schema/apply",
        required=("DirectoryArn",),
    )

    attach_object = Operation(
        "AttachObject",
        AttachObjectRequest,
        AttachObjectResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/object/attach",
        required=("DirectoryArn",),
    )

    attach_policy = Operation(
        "AttachPolicy",
        AttachPolicyRequest,
        AttachPolicyResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/policy/attach",
        required=("DirectoryArn",),
    )

    attach_to_index = Operation(
        "AttachToIndex",
        AttachToIndexRequest,
        AttachToIndexResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/index/attach",
        required=("DirectoryArn",),
    )

    attach_typed_link = Operation(
        "AttachTypedLink",
        AttachTypedLinkRequest,
        AttachTypedLinkResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/typedlink/attach",
        required=("DirectoryArn",),
    )

    batch_read = Operation(
        "BatchRead",
        BatchReadRequest,
        BatchReadResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/batchread",
        required=("DirectoryArn",),
    )

    batch_write = Operation(
        "BatchWrite",
        BatchWriteRequest,
        BatchWriteResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/batchwrite",
        required=("DirectoryArn",),
    )

    create_directory = Operation(
        "CreateDirectory",
        CreateDirectoryRequest,
        CreateDirectoryResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/directory/create",
        required=("SchemaArn",),
    )

    create_facet = Operation(
        "CreateFacet",
        CreateFacetRequest,
        CreateFacetResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/facet/create",
        required=("SchemaArn",),
    )

    create_index = Operation(
        "CreateIndex",
        CreateIndexRequest,
        CreateIndexResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/index",
        required=("DirectoryArn",),
    )

    create_object = Operation(
        "CreateObject",
        CreateObjectRequest,
        CreateObjectResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/object",
        required=("DirectoryArn",),
    )

    create_schema = Operation(
        "CreateSchema",
        CreateSchemaRequest,
        CreateSchemaResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/schema/create",
    )

    create_typed_link_facet = Operation(
        "CreateTypedLinkFacet",
        CreateTypedLinkFacetRequest,
        CreateTypedLinkFacetResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/typedlink/facet/create",
        required=("SchemaArn",),
    )

    delete_directory = Operation(
        "DeleteDirectory",
        DeleteDirectoryRequest,
        DeleteDirectoryResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/directory",
        required=("DirectoryArn",),
    )

    delete_facet = Operation(
        "DeleteFacet",
        DeleteFacetRequest,
        DeleteFacetResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/facet/delete",
        required=("SchemaArn",),
    )

    delete_object = Operation(
        "DeleteObject",
        DeleteObjectRequest,
        DeleteObjectResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/object/delete",
        required=("DirectoryArn",),
    )

    delete_schema = Operation(
        "DeleteSchema",
        DeleteSchemaRequest,
        DeleteSchemaResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/schema",
        required=("SchemaArn",),
    )

    delete_typed_link_facet = Operation(
        "DeleteTypedLinkFacet",
        DeleteTypedLinkFacetRequest,
        DeleteTypedLinkFacetResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/typedlink/facet/delete",
        required=("SchemaArn",),
    )

    detach_from_index = Operation(
        "DetachFromIndex",
        DetachFromIndexRequest,
        DetachFromIndexResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/index/detach",
        required=("DirectoryArn",),
    )

    detach_object = Operation(
        "DetachObject",
        DetachObjectRequest,
        DetachObjectResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/object/detach",
        required=("DirectoryArn",),
    )

    detach_policy = Operation(
        "DetachPolicy",
        DetachPolicyRequest,
        DetachPolicyResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/policy/detach",
        required=("DirectoryArn",),
    )

    detach_typed_link = Operation(
        "DetachTypedLink",
        DetachTypedLinkRequest,
        None,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/typedlink/detach",
        required=("DirectoryArn",),
    )

    disable_directory = Operation(
        "DisableDirectory",
        DisableDirectoryRequest,
        DisableDirectoryResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/directory/disable",
        required=("DirectoryArn",),
    )

    enable_directory = Operation(
        "EnableDirectory",
        EnableDirectoryRequest,
        EnableDirectoryResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/directory/enable",
        required=("DirectoryArn",),
    )

    get_applied_schema_version = Operation(
        "GetAppliedSchemaVersion",
        GetAppliedSchemaVersionRequest,
        GetAppliedSchemaVersionResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/schema/getappliedschema",
    )

    get_directory = Operation(
        "GetDirectory",
        GetDirectoryRequest,
        GetDirectoryResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/directory/get",
        required=("DirectoryArn",),
    )

    get_facet = Operation(
        "GetFacet",
        GetFacetRequest,
        GetFacetResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/facet",
        required=("SchemaArn",),
    )

    get_link_attributes = Operation(
        "GetLinkAttributes",
        GetLinkAttributesRequest,
        GetLinkAttributesResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/typedlink/attributes/get",
        required=("DirectoryArn",),
    )

    get_object_attributes = Operation(
        "GetObjectAttributes",
        GetObjectAttributesRequest,
        GetObjectAttributesResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/object/attributes/get",
        required=("DirectoryArn",),
    )

    get_object_information = Operation(
        "GetObjectInformation",
        GetObjectInformationRequest,
        GetObjectInformationResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/object/information",
        required=("DirectoryArn",),
    )

    get_schema_as_json = Operation(
        "GetSchemaAsJson",
        GetSchemaAsJsonRequest,
        GetSchemaAsJsonResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/schema/json",
        required=("SchemaArn",),
    )

    get_typed_link_facet_information = Operation(
        "GetTypedLinkFacetInformation",
        GetTypedLinkFacetInformationRequest,
        GetTypedLinkFacetInformationResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/typedlink/facet/get",
        required=("SchemaArn",),
    )

    list_applied_schema_arns = Operation(
        "ListAppliedSchemaArns",
        ListAppliedSchemaArnsRequest,
        ListAppliedSchemaArnsResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/schema/applied",
    )

    list_attached_indices = Operation(
        "ListAttachedIndices",
        ListAttachedIndicesRequest,
        ListAttachedIndicesResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/object/indices",
        required=("DirectoryArn",),
    )

    list_development_schema_arns = Operation(
        "ListDevelopmentSchemaArns",
        ListDevelopmentSchemaArnsRequest,
        ListDevelopmentSchemaArnsResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/schema/development",
    )

    list_directories = Operation(
        "ListDirectories",
        ListDirectoriesRequest,
        ListDirectoriesResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/directory/list",
    )

    list_facet_attributes = Operation(
        "ListFacetAttributes",
        ListFacetAttributesRequest,
        ListFacetAttributesResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/facet/attributes",
        required=("SchemaArn",),
    )

    list_facet_names = Operation(
        "ListFacetNames",
        ListFacetNamesRequest,
        ListFacetNamesResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/facet/list",
        required=("SchemaArn",),
    )

    list_incoming_typed_links = Operation(
        "ListIncomingTypedLinks",
        ListIncomingTypedLinksRequest,
        ListIncomingTypedLinksResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/typedlink/incoming",
        required=("DirectoryArn",),
    )

    list_index = Operation(
        "ListIndex",
        ListIndexRequest,
        ListIndexResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/index/targets",
        required=("DirectoryArn",),
    )

    list_managed_schema_arns = Operation(
        "ListManagedSchemaArns",
        ListManagedSchemaArnsRequest,
        ListManagedSchemaArnsResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/schema/managed",
    )

    list_object_attributes = Operation(
        "ListObjectAttributes",
        ListObjectAttributesRequest,
        ListObjectAttributesResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/object/attributes",
        required=("DirectoryArn",),
    )

    list_object_children = Operation(
        "ListObjectChildren",
        ListObjectChildrenRequest,
        ListObjectChildrenResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/object/children",
        required=("DirectoryArn",),
    )

    list_object_parent_paths = Operation(
        "ListObjectParentPaths",
        ListObjectParentPathsRequest,
        ListObjectParentPathsResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/object/parentpaths",
        required=("DirectoryArn",),
    )

    list_object_parents = Operation(
        "ListObjectParents",
        ListObjectParentsRequest,
        ListObjectParentsResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/object/parent",
        required=("DirectoryArn",),
    )

    list_object_policies = Operation(
        "ListObjectPolicies",
        ListObjectPoliciesRequest,
        ListObjectPoliciesResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/object/policy",
        required=("DirectoryArn",),
    )

    list_outgoing_typed_links = Operation(
        "ListOutgoingTypedLinks",
        ListOutgoingTypedLinksRequest,
        ListOutgoingTypedLinksResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/typedlink/outgoing",
        required=("DirectoryArn",),
    )

    list_policy_attachments = Operation(
        "ListPolicyAttachments",
        ListPolicyAttachmentsRequest,
        ListPolicyAttachmentsResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/policy/attachment",
        required=("DirectoryArn",),
    )

    list_published_schema_arns = Operation(
        "ListPublishedSchemaArns",
        ListPublishedSchemaArnsRequest,
        ListPublishedSchemaArnsResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/schema/published",
    )

    list_tags_for_resource = Operation(
        "ListTagsForResource",
        ListTagsForResourceRequest,
        ListTagsForResourceResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/tags",
    )

    list_typed_link_facet_attributes = Operation(
        "ListTypedLinkFacetAttributes",
        ListTypedLinkFacetAttributesRequest,
        ListTypedLinkFacetAttributesResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/typedlink/facet/attributes",
        required=("SchemaArn",),
    )

    list_typed_link_facet_names = Operation(
        "ListTypedLinkFacetNames",
        ListTypedLinkFacetNamesRequest,
        ListTypedLinkFacetNamesResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/typedlink/facet/list",
        required=("SchemaArn",),
    )

    lookup_policy = Operation(
        "LookupPolicy",
        LookupPolicyRequest,
        LookupPolicyResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/policy/lookup",
        required=("DirectoryArn",),
    )

    publish_schema = Operation(
        "PublishSchema",
        PublishSchemaRequest,
        PublishSchemaResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/schema/publish",
        required=("DevelopmentSchemaArn",),
    )

    put_schema_from_json = Operation(
        "PutSchemaFromJson",
        PutSchemaFromJsonRequest,
        PutSchemaFromJsonResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/schema/json",
        required=("SchemaArn",),
    )

    remove_facet_from_object = Operation(
        "RemoveFacetFromObject",
        RemoveFacetFromObjectRequest,
        RemoveFacetFromObjectResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/object/facets/delete",
        required=("DirectoryArn",),
    )

    tag_resource = Operation(
        "TagResource",
        TagResourceRequest,
        TagResourceResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/tags/add",
    )

    untag_resource = Operation(
        "UntagResource",
        UntagResourceRequest,
        UntagResourceResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/tags/remove",
    )

    update_facet = Operation(
        "UpdateFacet",
        UpdateFacetRequest,
        UpdateFacetResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/facet",
        required=("SchemaArn",),
    )

    update_link_attributes = Operation(
        "UpdateLinkAttributes",
        UpdateLinkAttributesRequest,
        UpdateLinkAttributesResponse,
        method=HttpMethod.POST,
        path="/amazonclouddirectory/2017-01-11/typedlink/attributes/update",
        required=("DirectoryArn",),
    )

    update_object_attributes = Operation(
        "UpdateObjectAttributes",
        UpdateObjectAttributesRequest,
        UpdateObjectAttributesResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/object/update",
        required=("DirectoryArn",),
    )

    update_schema = Operation(
        "UpdateSchema",
        UpdateSchemaRequest,
        UpdateSchemaResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/schema/update",
        required=("SchemaArn",),
    )

    update_typed_link_facet = Operation(
        "UpdateTypedLinkFacet",
        UpdateTypedLinkFacetRequest,
        UpdateTypedLinkFacetResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/typedlink/facet",
        required=("SchemaArn",),
    )

    upgrade_applied_schema = Operation(
        "UpgradeAppliedSchema",
        UpgradeAppliedSchemaRequest,
        UpgradeAppliedSchemaResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/schema/upgradeapplied",
    )

    upgrade_published_schema = Operation(
        "UpgradePublishedSchema",
        UpgradePublishedSchemaRequest,
        UpgradePublishedSchemaResponse,
        method=HttpMethod.PUT,
        path="/amazonclouddirectory/2017-01-11/schema/upgradepublished",
    )
