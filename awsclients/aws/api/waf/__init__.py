from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Required, TypedDict

from awsclients.aws.api.core import HttpMethod, ServiceRequest, SignerType
from awsclients.aws.service import Operation, ServiceClient

ChangeAction = Literal["INSERT", "DELETE"]
ChangeTokenStatus = Literal["PROVISIONED", "PENDING", "INSYNC"]
ComparisonOperator = Literal["EQ", "NE", "LE", "LT", "GE", "GT"]
GeoMatchConstraintType = Literal["Country"]
GeoMatchConstraintValue = Literal["AF", "AX", "AL", "DZ", "AS", "AD", "AO", "AI", "AQ", "AG", "AR", "AM", "AW", "AU", "AT", "AZ", "BS", "BH", "BD", "BB", "BY", "BE", "BZ", "BJ", "BM", "BT", "BO", "BQ", "BA", "BW", "BV", "BR", "IO", "BN", "BG", "BF", "BI", "KH", "CM", "CA", "CV", "KY", "CF", "TD", "CL", "CN", "CX", "CC", "CO", "KM", "CG", "CD", "CK", "CR", "CI", "HR", "CU", "CW", "CY", "CZ", "DK", "DJ", "DM", "DO", "EC", "EG", "SV", "GQ", "ER", "EE", "ET", "FK", "FO", "FJ", "FI", "FR", "GF", "PF", "TF", "GA", "GM", "GE", "DE", "GH", "GI", "GR", "GL", "GD", "GP", "GU", "GT", "GG", "GN", "GW", "GY", "HT", "HM", "VA", "HN", "HK", "HU", "IS", "IN", "ID", "IR", "IQ", "IE", "IM", "IL", "IT", "JM", "JP", "JE", "JO", "KZ", "KE", "KI", "KP", "KR", "KW", "KG", "LA", "LV", "LB", "LS", "LR", "LY", "LI", "LT", "LU", "MO", "MK", "MG", "MW", "MY", "MV", "ML", "MT", "MH", "MQ", "MR", "MU", "YT", "MX", "FM", "MD", "MC", "MN", "ME", "MS", "MA", "MZ", "MM", "NA", "NR", "NP", "NL", "NC", "NZ", "NI", "NE", "NG", "NU", "NF", "MP", "NO", "OM", "PK", "PW", "PS", "PA", "PG", "PY", "PE", "PH", "PN", "PL", "PT", "PR", "QA", "RE", "RO", "RU", "RW", "BL", "SH", "KN", "LC", "MF", "PM", "VC", "WS", "SM", "ST", "SA", "SN", "RS", "SC", "SL", "SG", "SX", "SK", "SI", "SB", "SO", "ZA", "GS", "SS", "ES", "LK", "SD", "SR", "SJ", "SZ", "SE", "CH", "SY", "TW", "TJ", "TZ", "TH", "TL", "TG", "TK", "TO", "TT", "TN", "TR", "TM", "TC", "TV", "UG", "UA", "AE", "GB", "US", "UM", "UY", "UZ", "VU", "VE", "VN", "VG", "VI", "WF", "EH", "YE", "ZM", "ZW"]
IPSetDescriptorType = Literal["IPV4", "IPV6"]
MatchFieldType = Literal["URI", "QUERY_STRING", "HEADER", "METHOD", "BODY", "SINGLE_QUERY_ARG", "ALL_QUERY_ARGS"]
PositionalConstraint = Literal["EXACTLY", "STARTS_WITH", "ENDS_WITH", "CONTAINS", "CONTAINS_WORD"]
PredicateType = Literal["IPMatch", "ByteMatch", "SqlInjectionMatch", "GeoMatch", "SizeConstraint", "XssMatch", "RegexMatch"]
RateKey = Literal["IP"]
TextTransformation = Literal["NONE", "COMPRESS_WHITE_SPACE", "HTML_ENTITY_DECODE", "LOWERCASE", "CMD_LINE", "URL_DECODE"]
WafActionType = Literal["BLOCK", "ALLOW", "COUNT"]
WafOverrideActionType = Literal["NONE", "COUNT"]
WafRuleType = Literal["REGULAR", "RATE_BASED", "GROUP"]


class WAFErrors(str, Enum):
    WAF_BAD_REQUEST = "WAFBadRequestException"
    WAF_DISALLOWED_NAME = "WAFDisallowedNameException"
    WAF_ENTITY_MIGRATION = "WAFEntityMigrationException"
    WAF_INTERNAL_ERROR = "WAFInternalErrorException"
    WAF_INVALID_ACCOUNT = "WAFInvalidAccountException"
    WAF_INVALID_OPERATION = "WAFInvalidOperationException"
    WAF_INVALID_PARAMETER = "WAFInvalidParameterException"
    WAF_INVALID_PERMISSION_POLICY = "WAFInvalidPermissionPolicyException"
    WAF_INVALID_REGEX_PATTERN = "WAFInvalidRegexPatternException"
    WAF_LIMITS_EXCEEDED = "WAFLimitsExceededException"
    WAF_NON_EMPTY_ENTITY = "WAFNonEmptyEntityException"
    WAF_NONEXISTENT_CONTAINER = "WAFNonexistentContainerException"
    WAF_NONEXISTENT_ITEM = "WAFNonexistentItemException"
    WAF_REFERENCED_ITEM = "WAFReferencedItemException"
    WAF_SERVICE_LINKED_ROLE_ERROR = "WAFServiceLinkedRoleErrorException"
    WAF_STALE_DATA = "WAFStaleDataException"
    WAF_SUBSCRIPTION_NOT_FOUND = "WAFSubscriptionNotFoundException"
    WAF_TAG_OPERATION = "WAFTagOperationException"
    WAF_TAG_OPERATION_INTERNAL_ERROR = "WAFTagOperationInternalErrorException"


RETRYABLE_ERRORS = frozenset()


class CreateByteMatchSetRequest(ServiceRequest, total=False):
    Name: Required[str]
    ChangeToken: Required[str]


class FieldToMatch(TypedDict, total=False):
    Type: Required[MatchFieldType]
    Data: str


class ByteMatchTuple(TypedDict, total=False):
    FieldToMatch: Required[FieldToMatch]
    TargetString: Required[bytes]
    TextTransformation: Required[TextTransformation]
    PositionalConstraint: Required[PositionalConstraint]


class ByteMatchSet(TypedDict, total=False):
    ByteMatchSetId: Required[str]
    Name: str
    ByteMatchTuples: Required[List[ByteMatchTuple]]


class CreateByteMatchSetResponse(TypedDict, total=False):
    ByteMatchSet: ByteMatchSet
    ChangeToken: str


class CreateGeoMatchSetRequest(ServiceRequest, total=False):
    Name: Required[str]
    ChangeToken: Required[str]


class GeoMatchConstraint(TypedDict, total=False):
    Type: Required[GeoMatchConstraintType]
    Value: Required[GeoMatchConstraintValue]


class GeoMatchSet(TypedDict, total=False):
    GeoMatchSetId: Required[str]
    Name: str
    GeoMatchConstraints: Required[List[GeoMatchConstraint]]


class CreateGeoMatchSetResponse(TypedDict, total=False):
    GeoMatchSet: GeoMatchSet
    ChangeToken: str


class CreateIPSetRequest(ServiceRequest, total=False):
    Name: Required[str]
    ChangeToken: Required[str]


class IPSetDescriptor(TypedDict, total=False):
    Type: Required[IPSetDescriptorType]
    Value: Required[str]


class IPSet(TypedDict, total=False):
    IPSetId: Required[str]
    Name: str
    IPSetDescriptors: Required[List[IPSetDescriptor]]


class CreateIPSetResponse(TypedDict, total=False):
    IPSet: IPSet
    ChangeToken: str


class Tag(TypedDict, total=False):
    Key: Required[str]
    Value: Required[str]


class CreateRateBasedRuleRequest(ServiceRequest, total=False):
    Name: Required[str]
    MetricName: Required[str]
    RateKey: Required[RateKey]
    RateLimit: Required[int]
    ChangeToken: Required[str]
    Tags: List[Tag]


class Predicate(TypedDict, total=False):
    Negated: Required[bool]
    Type: Required[PredicateType]
    DataId: Required[str]


class RateBasedRule(TypedDict, total=False):
    RuleId: Required[str]
    Name: str
    MetricName: str
    MatchPredicates: Required[List[Predicate]]
    RateKey: Required[RateKey]
    RateLimit: Required[int]


class CreateRateBasedRuleResponse(TypedDict, total=False):
    Rule: RateBasedRule
    ChangeToken: str


class CreateRegexMatchSetRequest(ServiceRequest, total=False):
    Name: Required[str]
    ChangeToken: Required[str]


class RegexMatchTuple(TypedDict, total=False):
    FieldToMatch: Required[FieldToMatch]
    TextTransformation: Required[TextTransformation]
    RegexPatternSetId: Required[str]


class RegexMatchSet(TypedDict, total=False):
    RegexMatchSetId: str
    Name: str
    RegexMatchTuples: List[RegexMatchTuple]


class CreateRegexMatchSetResponse(TypedDict, total=False):
    RegexMatchSet: RegexMatchSet
    ChangeToken: str


class CreateRegexPatternSetRequest(ServiceRequest, total=False):
    Name: Required[str]
    ChangeToken: Required[str]


class RegexPatternSet(TypedDict, total=False):
    RegexPatternSetId: Required[str]
    Name: str
    RegexPatternStrings: Required[List[str]]


class CreateRegexPatternSetResponse(TypedDict, total=False):
    RegexPatternSet: RegexPatternSet
    ChangeToken: str


class CreateRuleRequest(ServiceRequest, total=False):
    Name: Required[str]
    MetricName: Required[str]
    ChangeToken: Required[str]
    Tags: List[Tag]


class Rule(TypedDict, total=False):
    RuleId: Required[str]
    Name: str
    MetricName: str
    Predicates: Required[List[Predicate]]


class CreateRuleResponse(TypedDict, total=False):
    Rule: Rule
    ChangeToken: str


class CreateRuleGroupRequest(ServiceRequest, total=False):
    Name: Required[str]
    MetricName: Required[str]
    ChangeToken: Required[str]
    Tags: List[Tag]


class RuleGroup(TypedDict, total=False):
    RuleGroupId: Required[str]
    Name: str
    MetricName: str


class CreateRuleGroupResponse(TypedDict, total=False):
    RuleGroup: RuleGroup
    ChangeToken: str


class CreateSizeConstraintSetRequest(ServiceRequest, total=False):
    Name: Required[str]
    ChangeToken: Required[str]


class SizeConstraint(TypedDict, total=False):
    FieldToMatch: Required[FieldToMatch]
    TextTransformation: Required[TextTransformation]
    ComparisonOperator: Required[ComparisonOperator]
    Size: Required[int]


class SizeConstraintSet(TypedDict, total=False):
    SizeConstraintSetId: Required[str]
    Name: str
    SizeConstraints: Required[List[SizeConstraint]]


class CreateSizeConstraintSetResponse(TypedDict, total=False):
    SizeConstraintSet: SizeConstraintSet
    ChangeToken: str


class CreateSqlInjectionMatchSetRequest(ServiceRequest, total=False):
    Name: Required[str]
    ChangeToken: Required[str]


class SqlInjectionMatchTuple(TypedDict, total=False):
    FieldToMatch: Required[FieldToMatch]
    TextTransformation: Required[TextTransformation]


class SqlInjectionMatchSet(TypedDict, total=False):
    SqlInjectionMatchSetId: Required[str]
    Name: str
    SqlInjectionMatchTuples: Required[List[SqlInjectionMatchTuple]]


class CreateSqlInjectionMatchSetResponse(TypedDict, total=False):
    SqlInjectionMatchSet: SqlInjectionMatchSet
    ChangeToken: str


class WafAction(TypedDict, total=False):
    Type: Required[WafActionType]


class CreateWebACLRequest(ServiceRequest, total=False):
    Name: Required[str]
    MetricName: Required[str]
    DefaultAction: Required[WafAction]
    ChangeToken: Required[str]
    Tags: List[Tag]


class WafOverrideAction(TypedDict, total=False):
    Type: Required[WafOverrideActionType]


class ExcludedRule(TypedDict, total=False):
    RuleId: Required[str]


class ActivatedRule(TypedDict, total=False):
    Priority: Required[int]
    RuleId: Required[str]
    Action: WafAction
    OverrideAction: WafOverrideAction
    Type: WafRuleType
    ExcludedRules: List[ExcludedRule]


class WebACL(TypedDict, total=False):
    WebACLId: Required[str]
    Name: str
    MetricName: str
    DefaultAction: Required[WafAction]
    Rules: Required[List[ActivatedRule]]
    WebACLArn: str


class CreateWebACLResponse(TypedDict, total=False):
    WebACL: WebACL
    ChangeToken: str


class CreateWebACLMigrationStackRequest(ServiceRequest, total=False):
    WebACLId: Required[str]
    S3BucketName: Required[str]
    IgnoreUnsupportedType: Required[bool]


class CreateWebACLMigrationStackResponse(TypedDict, total=False):
    S3ObjectUrl: Required[str]


class CreateXssMatchSetRequest(ServiceRequest, total=False):
    Name: Required[str]
    ChangeToken: Required[str]


class XssMatchTuple(TypedDict, total=False):
    FieldToMatch: Required[FieldToMatch]
    TextTransformation: Required[TextTransformation]


class XssMatchSet(TypedDict, total=False):
    XssMatchSetId: Required[str]
    Name: str
    XssMatchTuples: Required[List[XssMatchTuple]]


class CreateXssMatchSetResponse(TypedDict, total=False):
    XssMatchSet: XssMatchSet
    ChangeToken: str


class DeleteByteMatchSetRequest(ServiceRequest, total=False):
    ByteMatchSetId: Required[str]
    ChangeToken: Required[str]


class DeleteByteMatchSetResponse(TypedDict, total=False):
    ChangeToken: str


class DeleteGeoMatchSetRequest(ServiceRequest, total=False):
    GeoMatchSetId: Required[str]
    ChangeToken: Required[str]


class DeleteGeoMatchSetResponse(TypedDict, total=False):
    ChangeToken: str


class DeleteIPSetRequest(ServiceRequest, total=False):
    IPSetId: Required[str]
    ChangeToken: Required[str]


class DeleteIPSetResponse(TypedDict, total=False):
    ChangeToken: str


class DeleteLoggingConfigurationRequest(ServiceRequest, total=False):
    ResourceArn: Required[str]


class DeleteLoggingConfigurationResponse(TypedDict, total=False):
    pass


class DeletePermissionPolicyRequest(ServiceRequest, total=False):
    ResourceArn: Required[str]


class DeletePermissionPolicyResponse(TypedDict, total=False):
    pass


class DeleteRateBasedRuleRequest(ServiceRequest, total=False):
    RuleId: Required[str]
    ChangeToken: Required[str]


class DeleteRateBasedRuleResponse(TypedDict, total=False):
    ChangeToken: str


class DeleteRegexMatchSetRequest(ServiceRequest, total=False):
    RegexMatchSetId: Required[str]
    ChangeToken: Required[str]


class DeleteRegexMatchSetResponse(TypedDict, total=False):
    ChangeToken: str


class DeleteRegexPatternSetRequest(ServiceRequest, total=False):
    RegexPatternSetId: Required[str]
    ChangeToken: Required[str]


class DeleteRegexPatternSetResponse(TypedDict, total=False):
    ChangeToken: str


class DeleteRuleRequest(ServiceRequest, total=False):
    RuleId: Required[str]
    ChangeToken: Required[str]


class DeleteRuleResponse(TypedDict, total=False):
    ChangeToken: str


class DeleteRuleGroupRequest(ServiceRequest, total=False):
    RuleGroupId: Required[str]
    ChangeToken: Required[str]


class DeleteRuleGroupResponse(TypedDict, total=False):
    ChangeToken: str


class DeleteSizeConstraintSetRequest(ServiceRequest, total=False):
    SizeConstraintSetId: Required[str]
    ChangeToken: Required[str]


class DeleteSizeConstraintSetResponse(TypedDict, total=False):
    ChangeToken: str


class DeleteSqlInjectionMatchSetRequest(ServiceRequest, total=False):
    SqlInjectionMatchSetId: Required[str]
    ChangeToken: Required[str]


class DeleteSqlInjectionMatchSetResponse(TypedDict, total=False):
    ChangeToken: str


class DeleteWebACLRequest(ServiceRequest, total=False):
    WebACLId: Required[str]
    ChangeToken: Required[str]


class DeleteWebACLResponse(TypedDict, total=False):
    ChangeToken: str


class DeleteXssMatchSetRequest(ServiceRequest, total=False):
    XssMatchSetId: Required[str]
    ChangeToken: Required[str]


class DeleteXssMatchSetResponse(TypedDict, total=False):
    ChangeToken: str


class GetByteMatchSetRequest(ServiceRequest, total=False):
    ByteMatchSetId: Required[str]


class GetByteMatchSetResponse(TypedDict, total=False):
    ByteMatchSet: ByteMatchSet


class GetChangeTokenRequest(ServiceRequest, total=False):
    pass


class GetChangeTokenResponse(TypedDict, total=False):
    ChangeToken: str


class GetChangeTokenStatusRequest(ServiceRequest, total=False):
    ChangeToken: Required[str]


class GetChangeTokenStatusResponse(TypedDict, total=False):
    ChangeTokenStatus: ChangeTokenStatus


class GetGeoMatchSetRequest(ServiceRequest, total=False):
    GeoMatchSetId: Required[str]


class GetGeoMatchSetResponse(TypedDict, total=False):
    GeoMatchSet: GeoMatchSet


class GetIPSetRequest(ServiceRequest, total=False):
    IPSetId: Required[str]


class GetIPSetResponse(TypedDict, total=False):
    IPSet: IPSet


class GetLoggingConfigurationRequest(ServiceRequest, total=False):
    ResourceArn: Required[str]


class LoggingConfiguration(TypedDict, total=False):
    ResourceArn: Required[str]
    LogDestinationConfigs: Required[List[str]]
    RedactedFields: List[FieldToMatch]


class GetLoggingConfigurationResponse(TypedDict, total=False):
    LoggingConfiguration: LoggingConfiguration


class GetPermissionPolicyRequest(ServiceRequest, total=False):
    ResourceArn: Required[str]


class GetPermissionPolicyResponse(TypedDict, total=False):
    Policy: str


class GetRateBasedRuleRequest(ServiceRequest, total=False):
    RuleId: Required[str]


class GetRateBasedRuleResponse(TypedDict, total=False):
    Rule: RateBasedRule


class GetRateBasedRuleManagedKeysRequest(ServiceRequest, total=False):
    RuleId: Required[str]
    NextMarker: str


class GetRateBasedRuleManagedKeysResponse(TypedDict, total=False):
    ManagedKeys: List[str]
    NextMarker: str


class GetRegexMatchSetRequest(ServiceRequest, total=False):
    RegexMatchSetId: Required[str]


class GetRegexMatchSetResponse(TypedDict, total=False):
    RegexMatchSet: RegexMatchSet


class GetRegexPatternSetRequest(ServiceRequest, total=False):
    RegexPatternSetId: Required[str]


class GetRegexPatternSetResponse(TypedDict, total=False):
    RegexPatternSet: RegexPatternSet


class GetRuleRequest(ServiceRequest, total=False):
    RuleId: Required[str]


class GetRuleResponse(TypedDict, total=False):
    Rule: Rule


class GetRuleGroupRequest(ServiceRequest, total=False):
    RuleGroupId: Required[str]


class GetRuleGroupResponse(TypedDict, total=False):
    RuleGroup: RuleGroup


class TimeWindow(TypedDict, total=False):
    StartTime: Required[datetime]
    EndTime: Required[datetime]


class GetSampledRequestsRequest(ServiceRequest, total=False):
    WebAclId: Required[str]
    RuleId: Required[str]
    TimeWindow: Required[TimeWindow]
    MaxItems: Required[int]


class HTTPHeader(TypedDict, total=False):
    Name: str
    Value: str


class HTTPRequest(TypedDict, total=False):
    ClientIP: str
    Country: str
    URI: str
    Method: str
    HTTPVersion: str
    Headers: List[HTTPHeader]


class SampledHTTPRequest(TypedDict, total=False):
    Request: Required[HTTPRequest]
    Weight: Required[int]
    Timestamp: datetime
    Action: str
    RuleWithinRuleGroup: str


class GetSampledRequestsResponse(TypedDict, total=False):
    SampledRequests: List[SampledHTTPRequest]
    PopulationSize: int
    TimeWindow: TimeWindow


class GetSizeConstraintSetRequest(ServiceRequest, total=False):
    SizeConstraintSetId: Required[str]


class GetSizeConstraintSetResponse(TypedDict, total=False):
    SizeConstraintSet: SizeConstraintSet


class GetSqlInjectionMatchSetRequest(ServiceRequest, total=False):
    SqlInjectionMatchSetId: Required[str]


class GetSqlInjectionMatchSetResponse(TypedDict, total=False):
    SqlInjectionMatchSet: SqlInjectionMatchSet


class GetWebACLRequest(ServiceRequest, total=False):
    WebACLId: Required[str]


class GetWebACLResponse(TypedDict, total=False):
    WebACL: WebACL


class GetXssMatchSetRequest(ServiceRequest, total=False):
    XssMatchSetId: Required[str]


class GetXssMatchSetResponse(TypedDict, total=False):
    XssMatchSet: XssMatchSet


class ListActivatedRulesInRuleGroupRequest(ServiceRequest, total=False):
    RuleGroupId: str
    NextMarker: str
    Limit: int


class ListActivatedRulesInRuleGroupResponse(TypedDict, total=False):
    NextMarker: str
    ActivatedRules: List[ActivatedRule]


class ListByteMatchSetsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class ByteMatchSetSummary(TypedDict, total=False):
    ByteMatchSetId: Required[str]
    Name: Required[str]


class ListByteMatchSetsResponse(TypedDict, total=False):
    NextMarker: str
    ByteMatchSets: List[ByteMatchSetSummary]


class ListGeoMatchSetsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class GeoMatchSetSummary(TypedDict, total=False):
    GeoMatchSetId: Required[str]
    Name: Required[str]


class ListGeoMatchSetsResponse(TypedDict, total=False):
    NextMarker: str
    GeoMatchSets: List[GeoMatchSetSummary]


class ListIPSetsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class IPSetSummary(TypedDict, total=False):
    IPSetId: Required[str]
    Name: Required[str]


class ListIPSetsResponse(TypedDict, total=False):
    NextMarker: str
    IPSets: List[IPSetSummary]


class ListLoggingConfigurationsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class ListLoggingConfigurationsResponse(TypedDict, total=False):
    LoggingConfigurations: List[LoggingConfiguration]
    NextMarker: str


class ListRateBasedRulesRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class RuleSummary(TypedDict, total=False):
    RuleId: Required[str]
    Name: Required[str]


class ListRateBasedRulesResponse(TypedDict, total=False):
    NextMarker: str
    Rules: List[RuleSummary]


class ListRegexMatchSetsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class RegexMatchSetSummary(TypedDict, total=False):
    RegexMatchSetId: Required[str]
    Name: Required[str]


class ListRegexMatchSetsResponse(TypedDict, total=False):
    NextMarker: str
    RegexMatchSets: List[RegexMatchSetSummary]


class ListRegexPatternSetsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class RegexPatternSetSummary(TypedDict, total=False):
    RegexPatternSetId: Required[str]
    Name: Required[str]


class ListRegexPatternSetsResponse(TypedDict, total=False):
    NextMarker: str
    RegexPatternSets: List[RegexPatternSetSummary]


class ListRuleGroupsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class RuleGroupSummary(TypedDict, total=False):
    RuleGroupId: Required[str]
    Name: Required[str]


class ListRuleGroupsResponse(TypedDict, total=False):
    NextMarker: str
    RuleGroups: List[RuleGroupSummary]


class ListRulesRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class ListRulesResponse(TypedDict, total=False):
    NextMarker: str
    Rules: List[RuleSummary]


class ListSizeConstraintSetsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class SizeConstraintSetSummary(TypedDict, total=False):
    SizeConstraintSetId: Required[str]
    Name: Required[str]


class ListSizeConstraintSetsResponse(TypedDict, total=False):
    NextMarker: str
    SizeConstraintSets: List[SizeConstraintSetSummary]


class ListSqlInjectionMatchSetsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class SqlInjectionMatchSetSummary(TypedDict, total=False):
    SqlInjectionMatchSetId: Required[str]
    Name: Required[str]


class ListSqlInjectionMatchSetsResponse(TypedDict, total=False):
    NextMarker: str
    SqlInjectionMatchSets: List[SqlInjectionMatchSetSummary]


class ListSubscribedRuleGroupsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class SubscribedRuleGroupSummary(TypedDict, total=False):
    RuleGroupId: Required[str]
    Name: Required[str]
    MetricName: Required[str]


class ListSubscribedRuleGroupsResponse(TypedDict, total=False):
    NextMarker: str
    RuleGroups: List[SubscribedRuleGroupSummary]


class ListTagsForResourceRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int
    ResourceARN: Required[str]


class TagInfoForResource(TypedDict, total=False):
    ResourceARN: str
    TagList: List[Tag]


class ListTagsForResourceResponse(TypedDict, total=False):
    NextMarker: str
    TagInfoForResource: TagInfoForResource


class ListWebACLsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class WebACLSummary(TypedDict, total=False):
    WebACLId: Required[str]
    Name: Required[str]


class ListWebACLsResponse(TypedDict, total=False):
    NextMarker: str
    WebACLs: List[WebACLSummary]


class ListXssMatchSetsRequest(ServiceRequest, total=False):
    NextMarker: str
    Limit: int


class XssMatchSetSummary(TypedDict, total=False):
    XssMatchSetId: Required[str]
    Name: Required[str]


class ListXssMatchSetsResponse(TypedDict, total=False):
    NextMarker: str
    XssMatchSets: List[XssMatchSetSummary]


class PutLoggingConfigurationRequest(ServiceRequest, total=False):
    LoggingConfiguration: Required[LoggingConfiguration]


class PutLoggingConfigurationResponse(TypedDict, total=False):
    LoggingConfiguration: LoggingConfiguration


class PutPermissionPolicyRequest(ServiceRequest, total=False):
    ResourceArn: Required[str]
    Policy: Required[str]


class PutPermissionPolicyResponse(TypedDict, total=False):
    pass


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


class ByteMatchSetUpdate(TypedDict, total=False):
    Action: Required[ChangeAction]
    ByteMatchTuple: Required[ByteMatchTuple]


class UpdateByteMatchSetRequest(ServiceRequest, total=False):
    ByteMatchSetId: Required[str]
    ChangeToken: Required[str]
    Updates: Required[List[ByteMatchSetUpdate]]


class UpdateByteMatchSetResponse(TypedDict, total=False):
    ChangeToken: str


class GeoMatchSetUpdate(TypedDict, total=False):
    Action: Required[ChangeAction]
    GeoMatchConstraint: Required[GeoMatchConstraint]


class UpdateGeoMatchSetRequest(ServiceRequest, total=False):
    GeoMatchSetId: Required[str]
    ChangeToken: Required[str]
    Updates: Required[List[GeoMatchSetUpdate]]


class UpdateGeoMatchSetResponse(TypedDict, total=False):
    ChangeToken: str


class IPSetUpdate(TypedDict, total=False):
    Action: Required[ChangeAction]
    IPSetDescriptor: Required[IPSetDescriptor]


class UpdateIPSetRequest(ServiceRequest, total=False):
    IPSetId: Required[str]
    ChangeToken: Required[str]
    Updates: Required[List[IPSetUpdate]]


class UpdateIPSetResponse(TypedDict, total=False):
    ChangeToken: str


class RuleUpdate(TypedDict, total=False):
    Action: Required[ChangeAction]
    Predicate: Required[Predicate]


class UpdateRateBasedRuleRequest(ServiceRequest, total=False):
    RuleId: Required[str]
    ChangeToken: Required[str]
    Updates: Required[List[RuleUpdate]]
    RateLimit: Required[int]


class UpdateRateBasedRuleResponse(TypedDict, total=False):
    ChangeToken: str


class RegexMatchSetUpdate(TypedDict, total=False):
    Action: Required[ChangeAction]
    RegexMatchTuple: Required[RegexMatchTuple]


class UpdateRegexMatchSetRequest(ServiceRequest, total=False):
    RegexMatchSetId: Required[str]
    Updates: Required[List[RegexMatchSetUpdate]]
    ChangeToken: Required[str]


class UpdateRegexMatchSetResponse(TypedDict, total=False):
    ChangeToken: str


class RegexPatternSetUpdate(TypedDict, total=False):
    Action: Required[ChangeAction]
    RegexPatternString: Required[str]


class UpdateRegexPatternSetRequest(ServiceRequest, total=False):
    RegexPatternSetId: Required[str]
    Updates: Required[List[RegexPatternSetUpdate]]
    ChangeToken: Required[str]


class UpdateRegexPatternSetResponse(TypedDict, total=False):
    ChangeToken: str


class UpdateRuleRequest(ServiceRequest, total=False):
    RuleId: Required[str]
    ChangeToken: Required[str]
    Updates: Required[List[RuleUpdate]]


class UpdateRuleResponse(TypedDict, total=False):
    ChangeToken: str


class RuleGroupUpdate(TypedDict, total=False):
    Action: Required[ChangeAction]
    ActivatedRule: Required[ActivatedRule]


class UpdateRuleGroupRequest(ServiceRequest, total=False):
    RuleGroupId: Required[str]
    Updates: Required[List[RuleGroupUpdate]]
    ChangeToken: Required[str]


class UpdateRuleGroupResponse(TypedDict, total=False):
    ChangeToken: str


class SizeConstraintSetUpdate(TypedDict, total=False):
    Action: Required[ChangeAction]
    SizeConstraint: Required[SizeConstraint]


class UpdateSizeConstraintSetRequest(ServiceRequest, total=False):
    SizeConstraintSetId: Required[str]
    ChangeToken: Required[str]
    Updates: Required[List[SizeConstraintSetUpdate]]


class UpdateSizeConstraintSetResponse(TypedDict, total=False):
    ChangeToken: str


class SqlInjectionMatchSetUpdate(TypedDict, total=False):
    Action: Required[ChangeAction]
    SqlInjectionMatchTuple: Required[SqlInjectionMatchTuple]


class UpdateSqlInjectionMatchSetRequest(ServiceRequest, total=False):
    SqlInjectionMatchSetId: Required[str]
    ChangeToken: Required[str]
    Updates: Required[List[SqlInjectionMatchSetUpdate]]


class UpdateSqlInjectionMatchSetResponse(TypedDict, total=False):
    ChangeToken: str


class WebACLUpdate(TypedDict, total=False):
    Action: Required[ChangeAction]
    ActivatedRule: Required[ActivatedRule]


class UpdateWebACLRequest(ServiceRequest, total=False):
    WebACLId: Required[str]
    ChangeToken: Required[str]
    Updates: List[WebACLUpdate]
    DefaultAction: WafAction


class UpdateWebACLResponse(TypedDict, total=False):
    ChangeToken: str


class XssMatchSetUpdate(TypedDict, total=False):
    Action: Required[ChangeAction]
    XssMatchTuple: Required[XssMatchTuple]


class UpdateXssMatchSetRequest(ServiceRequest, total=False):
    XssMatchSetId: Required[str]
    ChangeToken: Required[str]
    Updates: Required[List[XssMatchSetUpdate]]


class UpdateXssMatchSetResponse(TypedDict, total=False):
    ChangeToken: str


class WAFClient(ServiceClient):
    """Client of AWS WAF (2015-08-24)."""

    service = "waf"
    version = "2015-08-24"
    client_name = "AWS WAF"
    errors = WAFErrors
    retryable_errors = RETRYABLE_ERRORS

    create_byte_match_set = Operation(
        "CreateByteMatchSet",
        CreateByteMatchSetRequest,
        CreateByteMatchSetResponse,
        method=HttpMethod.POST,
    )

    create_geo_match_set = Operation(
        "CreateGeoMatchSet",
        CreateGeoMatchSetRequest,
        CreateGeoMatchSetResponse,
        method=HttpMethod.POST,
    )

    create_ip_set = Operation(
        "CreateIPSet",
        CreateIPSetRequest,
        CreateIPSetResponse,
        method=HttpMethod.POST,
    )

    create_rate_based_rule = Operation(
        "CreateRateBasedRule",
        CreateRateBasedRuleRequest,
        CreateRateBasedRuleResponse,
        method=HttpMethod.POST,
    )

    create_regex_match_set = Operation(
        "CreateRegexMatchSet",
        CreateRegexMatchSetRequest,
        CreateRegexMatchSetResponse,
        method=HttpMethod.POST,
    )

    create_regex_pattern_set = Operation(
        "CreateRegexPatternSet",
        CreateRegexPatternSetRequest,
        CreateRegexPatternSetResponse,
        method=HttpMethod.POST,
    )

    create_rule = Operation(
        "CreateRule",
        CreateRuleRequest,
        CreateRuleResponse,
        method=HttpMethod.POST,
    )

    create_rule_group = Operation(
        "CreateRuleGroup",
        CreateRuleGroupRequest,
        CreateRuleGroupResponse,
        method=HttpMethod.POST,
    )

    create_size_constraint_set = Operation(
        "CreateSizeConstraintSet",
        CreateSizeConstraintSetRequest,
        CreateSizeConstraintSetResponse,
        method=HttpMethod.POST,
    )

    create_sql_injection_match_set = Operation(
        "CreateSqlInjectionMatchSet",
        CreateSqlInjectionMatchSetRequest,
        CreateSqlInjectionMatchSetResponse,
        method=HttpMethod.POST,
    )

    create_web_acl = Operation(
        "CreateWebACL",
        CreateWebACLRequest,
        CreateWebACLResponse,
        method=HttpMethod.POST,
    )

    create_web_acl_migration_stack = Operation(
        "CreateWebACLMigrationStack",
        CreateWebACLMigrationStackRequest,
        CreateWebACLMigrationStackResponse,
        method=HttpMethod.POST,
    )

    create_xss_match_set = Operation(
        "CreateXssMatchSet",
        CreateXssMatchSetRequest,
        CreateXssMatchSetResponse,
        method=HttpMethod.POST,
    )

    delete_byte_match_set = Operation(
        "DeleteByteMatchSet",
        DeleteByteMatchSetRequest,
        DeleteByteMatchSetResponse,
        method=HttpMethod.POST,
    )

    delete_geo_match_set = Operation(
        "DeleteGeoMatchSet",
        DeleteGeoMatchSetRequest,
        DeleteGeoMatchSetResponse,
        method=HttpMethod.POST,
    )

    delete_ip_set = Operation(
        "DeleteIPSet",
        DeleteIPSetRequest,
        DeleteIPSetResponse,
        method=HttpMethod.POST,
    )

    delete_logging_configuration = Operation(
        "DeleteLoggingConfiguration",
        DeleteLoggingConfigurationRequest,
        DeleteLoggingConfigurationResponse,
        method=HttpMethod.POST,
    )

    delete_permission_policy = Operation(
        "DeletePermissionPolicy",
        DeletePermissionPolicyRequest,
        DeletePermissionPolicyResponse,
        method=HttpMethod.POST,
    )

    delete_rate_based_rule = Operation(
        "DeleteRateBasedRule",
        DeleteRateBasedRuleRequest,
        DeleteRateBasedRuleResponse,
        method=HttpMethod.POST,
    )

    delete_regex_match_set = Operation(
        "DeleteRegexMatchSet",
        DeleteRegexMatchSetRequest,
        DeleteRegexMatchSetResponse,
        method=HttpMethod.POST,
    )

    delete_regex_pattern_set = Operation(
        "DeleteRegexPatternSet",
        DeleteRegexPatternSetRequest,
        DeleteRegexPatternSetResponse,
        method=HttpMethod.POST,
    )

    delete_rule = Operation(
        "DeleteRule",
        DeleteRuleRequest,
        DeleteRuleResponse,
        method=HttpMethod.POST,
    )

    delete_rule_group = Operation(
        "DeleteRuleGroup",
        DeleteRuleGroupRequest,
        DeleteRuleGroupResponse,
        method=HttpMethod.POST,
    )

    delete_size_constraint_set = Operation(
        "DeleteSizeConstraintSet",
        DeleteSizeConstraintSetRequest,
        DeleteSizeConstraintSetResponse,
        method=HttpMethod.POST,
    )

    delete_sql_injection_match_set = Operation(
        "DeleteSqlInjectionMatchSet",
        DeleteSqlInjectionMatchSetRequest,
        DeleteSqlInjectionMatchSetResponse,
        method=HttpMethod.POST,
    )

    delete_web_acl = Operation(
        "DeleteWebACL",
        DeleteWebACLRequest,
        DeleteWebACLResponse,
        method=HttpMethod.POST,
    )

    delete_xss_match_set = Operation(
        "DeleteXssMatchSet",
        DeleteXssMatchSetRequest,
        DeleteXssMatchSetResponse,
        method=HttpMethod.POST,
    )

    get_byte_match_set = Operation(
        "GetByteMatchSet",
        GetByteMatchSetRequest,
        GetByteMatchSetResponse,
        method=HttpMethod.POST,
    )

    get_change_token = Operation(
        "GetChangeToken",
        GetChangeTokenRequest,
        GetChangeTokenResponse,
        method=HttpMethod.POST,
    )

    get_change_token_status = Operation(
        "GetChangeTokenStatus",
        GetChangeTokenStatusRequest,
        GetChangeTokenStatusResponse,
        method=HttpMethod.POST,
    )

    get_geo_match_set = Operation(
        "GetGeoMatchSet",
        GetGeoMatchSetRequest,
        GetGeoMatchSetResponse,
        method=HttpMethod.POST,
    )

    get_ip_set = Operation(
        "GetIPSet",
        GetIPSetRequest,
        GetIPSetResponse,
        method=HttpMethod.POST,
    )

    get_logging_configuration = Operation(
        "GetLoggingConfiguration",
        GetLoggingConfigurationRequest,
        GetLoggingConfigurationResponse,
        method=HttpMethod.POST,
    )

    get_permission_policy = Operation(
        "GetPermissionPolicy",
        GetPermissionPolicyRequest,
        GetPermissionPolicyResponse,
        method=HttpMethod.POST,
    )

    get_rate_based_rule = Operation(
        "GetRateBasedRule",
        GetRateBasedRuleRequest,
        GetRateBasedRuleResponse,
        method=HttpMethod.POST,
    )

    get_rate_based_rule_managed_keys = Operation(
        "GetRateBasedRuleManagedKeys",
        GetRateBasedRuleManagedKeysRequest,
        GetRateBasedRuleManagedKeysResponse,
        method=HttpMethod.POST,
    )

    get_regex_match_set = Operation(
        "GetRegexMatchSet",
        GetRegexMatchSetRequest,
        GetRegexMatchSetResponse,
        method=HttpMethod.POST,
    )

    get_regex_pattern_set = Operation(
        "GetRegexPatternSet",
        GetRegexPatternSetRequest,
        GetRegexPatternSetResponse,
        method=HttpMethod.POST,
    )

    get_rule = Operation(
        "GetRule",
        GetRuleRequest,
        GetRuleResponse,
        method=HttpMethod.POST,
    )

    get_rule_group = Operation(
        "GetRuleGroup",
        GetRuleGroupRequest,
        GetRuleGroupResponse,
        method=HttpMethod.POST,
    )

    get_sampled_requests = Operation(
        "GetSampledRequests",
        GetSampledRequestsRequest,
        GetSampledRequestsResponse,
        method=HttpMethod.POST,
    )

    get_size_constraint_set = Operation(
        "GetSizeConstraintSet",
        GetSizeConstraintSetRequest,
        GetSizeConstraintSetResponse,
        method=HttpMethod.POST,
    )

    get_sql_injection_match_set = Operation(
        "GetSqlInjectionMatchSet",
        GetSqlInjectionMatchSetRequest,
        GetSqlInjectionMatchSetResponse,
        method=HttpMethod.POST,
    )

    get_web_acl = Operation(
        "GetWebACL",
        GetWebACLRequest,
        GetWebACLResponse,
        method=HttpMethod.POST,
    )

    get_xss_match_set = Operation(
        "GetXssMatchSet",
        GetXssMatchSetRequest,
        GetXssMatchSetResponse,
        method=HttpMethod.POST,
    )

    list_activated_rules_in_rule_group = Operation(
        "ListActivatedRulesInRuleGroup",
        ListActivatedRulesInRuleGroupRequest,
        ListActivatedRulesInRuleGroupResponse,
        method=HttpMethod.POST,
    )

    list_byte_match_sets = Operation(
        "ListByteMatchSets",
        ListByteMatchSetsRequest,
        ListByteMatchSetsResponse,
        method=HttpMethod.POST,
    )

    list_geo_match_sets = Operation(
        "ListGeoMatchSets",
        ListGeoMatchSetsRequest,
        ListGeoMatchSetsResponse,
        method=HttpMethod.POST,
    )

    list_ip_sets = Operation(
        "ListIPSets",
        ListIPSetsRequest,
        ListIPSetsResponse,
        method=HttpMethod.POST,
    )

    list_logging_configurations = Operation(
        "ListLoggingConfigurations",
        ListLoggingConfigurationsRequest,
        ListLoggingConfigurationsResponse,
        method=HttpMethod.POST,
    )

    list_rate_based_rules = Operation(
        "ListRateBasedRules",
        ListRateBasedRulesRequest,
        ListRateBasedRulesResponse,
        method=HttpMethod.POST,
    )

    list_regex_match_sets = Operation(
        "ListRegexMatchSets",
        ListRegexMatchSetsRequest,
        ListRegexMatchSetsResponse,
        method=HttpMethod.POST,
    )

    list_regex_pattern_sets = Operation(
        "ListRegexPatternSets",
        ListRegexPatternSetsRequest,
        ListRegexPatternSetsResponse,
        method=HttpMethod.POST,
    )

    list_rule_groups = Operation(
        "ListRuleGroups",
        ListRuleGroupsRequest,
        ListRuleGroupsResponse,
        method=HttpMethod.POST,
    )

    list_rules = Operation(
        "ListRules",
        ListRulesRequest,
        ListRulesResponse,
        method=HttpMethod.POST,
    )

    list_size_constraint_sets = Operation(
        "ListSizeConstraintSets",
        ListSizeConstraintSetsRequest,
        ListSizeConstraintSetsResponse,
        method=HttpMethod.POST,
    )

    list_sql_injection_match_sets = Operation(
        "ListSqlInjectionMatchSets",
        ListSqlInjectionMatchSetsRequest,
        ListSqlInjectionMatchSetsResponse,
        method=HttpMethod.POST,
    )

    list_subscribed_rule_groups = Operation(
        "ListSubscribedRuleGroups",
        ListSubscribedRuleGroupsRequest,
        ListSubscribedRuleGroupsResponse,
        method=HttpMethod.POST,
    )

    list_tags_for_resource = Operation(
        "ListTagsForResource",
        ListTagsForResourceRequest,
        ListTagsForResourceResponse,
        method=HttpMethod.POST,
    )

    list_web_ac_ls = Operation(
        "ListWebACLs",
        ListWebACLsRequest,
        ListWebACLsResponse,
        method=HttpMethod.POST,
    )

    list_xss_match_sets = Operation(
        "ListXssMatchSets",
        ListXssMatchSetsRequest,
        ListXssMatchSetsResponse,
        method=HttpMethod.POST,
    )

    put_logging_configuration = Operation(
        "PutLoggingConfiguration",
        PutLoggingConfigurationRequest,
        PutLoggingConfigurationResponse,
        method=HttpMethod.POST,
    )

    put_permission_policy = Operation(
        "PutPermissionPolicy",
        PutPermissionPolicyRequest,
        PutPermissionPolicyResponse,
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

    update_byte_match_set = Operation(
        "UpdateByteMatchSet",
        UpdateByteMatchSetRequest,
        UpdateByteMatchSetResponse,
        method=HttpMethod.POST,
    )

    update_geo_match_set = Operation(
        "UpdateGeoMatchSet",
        UpdateGeoMatchSetRequest,
        UpdateGeoMatchSetResponse,
        method=HttpMethod.POST,
    )

    update_ip_set = Operation(
        "UpdateIPSet",
        UpdateIPSetRequest,
        UpdateIPSetResponse,
        method=HttpMethod.POST,
    )

    update_rate_based_rule = Operation(
        "UpdateRateBasedRule",
        UpdateRateBasedRuleRequest,
        UpdateRateBasedRuleResponse,
        method=HttpMethod.POST,
    )

    update_regex_match_set = Operation(
        "UpdateRegexMatchSet",
        UpdateRegexMatchSetRequest,
        UpdateRegexMatchSetResponse,
        method=HttpMethod.POST,
    )

    update_regex_pattern_set = Operation(
        "UpdateRegexPatternSet",
        UpdateRegexPatternSetRequest,
        UpdateRegexPatternSetResponse,
        method=HttpMethod.POST,
    )

    update_rule = Operation(
        "UpdateRule",
        UpdateRuleRequest,
        UpdateRuleResponse,
        method=HttpMethod.POST,
    )

    update_rule_group = Operation(
        "UpdateRuleGroup",
        UpdateRuleGroupRequest,
        UpdateRuleGroupResponse,
        method=HttpMethod.POST,
    )

    update_size_constraint_set = Operation(
        "UpdateSizeConstraintSet",
        UpdateSizeConstraintSetRequest,
        UpdateSizeConstraintSetResponse,
        method=HttpMethod.POST,
    )

    update_sql_injection_match_set = Operation(
        "UpdateSqlInjectionMatchSet",
        UpdateSqlInjectionMatchSetRequest,
        UpdateSqlInjectionMatchSetResponse,
        method=HttpMethod.POST,
    )

    update_web_acl = Operation(
        "UpdateWebACL",
        UpdateWebACLRequest,
        UpdateWebACLResponse,
        method=HttpMethod.POST,
    )

    update_xss_match_set = Operation(
        "UpdateXssMatchSet",
        UpdateXssMatchSetRequest,
        UpdateXssMatchSetResponse,
        method=HttpMethod.POST,
    )
