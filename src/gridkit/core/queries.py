"""Static GraphQL documents used by the profile search service."""

FILTER_METADATA_QUERY = """query GetFilterMetadata {
  profileTypes(order_by: {name: Asc}) { id name }
  profileSectors(order_by: {name: Asc}) { id name }
  profileStatuses(order_by: {name: Asc}) { id name }
  productTypes(order_by: {name: Asc}) { id name }
  productStatuses(order_by: {name: Asc}) { id name }
  assetTypes(order_by: {name: Asc}) { id name }
  assetStatuses(order_by: {name: Asc}) { id name }
  tagTypes(order_by: {name: Asc}) { id name }
  tags(order_by: {name: Asc}, limit: 500) { id name tagType { id name } }
}"""

PROFILE_SEARCH_QUERY = """query SearchProfiles($where: ProfileInfosBoolExp, $limit: Int, $offset: Int) {
  profileInfos(where: $where, limit: $limit, offset: $offset, order_by: {name: Asc}) {
    id
    name
    profileType { id name }
    profileSector { id name }
    profileStatus { id name }
  }
}"""

# Facet queries are generated per call by FacetCompiler.
FACET_AGGREGATE_FIELD = "profileInfosAggregate"
FACET_OPERATION_NAME = "GetProfileFacetCounts"
