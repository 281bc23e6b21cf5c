#: Record key versions denoting an offset commit record
OFFSET_COMMIT_KEY_VERSIONS = (0, 1)
#: Record key version denoting a group metadata record
GROUP_METADATA_KEY_VERSION = 2

#: Highest known version of the consumer protocol subscription blob
MAX_SUBSCRIPTION_VERSION = 3
#: Highest known version of the consumer protocol assignment blob
MAX_ASSIGNMENT_VERSION = 3

#: Length or count prefix denoting a null string, byte array or array
NULL_LENGTH = -1

#: Timestamp value Kafka writes when a timestamp is unset
UNSET_TIMESTAMP = -1

#: The ``protocol_type`` of groups using the standard consumer protocol
CONSUMER_PROTOCOL_TYPE = "consumer"
