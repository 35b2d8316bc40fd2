"""Sample Nuclino API responses for testing.

These fixtures come from the example data in the Nuclino API documentation,
as raw JSON strings exactly as the service sends them.
"""

WORKSPACE_ID = "127a8c4a-b3c6-4a42-8fef-b6c521e6c8cf"
TEAM_ID = "020f9737-7b21-442b-85eb-bd420e5593b2"
USER_ID = "2e96f3bb-c742-4164-af2c-151ab2fd346b"
ITEM_ID = "aaf6d580-565d-497b-9ff3-b32075de3f4c"
COLLECTION_ID = "e9e648b3-8ce3-410d-8ef8-51b46c63cdaf"
FILE_ID = "eec0a152-b1e9-43fd-bef8-987f95c85c6e"

SAMPLE_USER = """{
  "status": "success",
  "data": {
    "object": "user",
    "id": "9bff403a-6e0a-4f17-beac-c4333bd719b4",
    "firstName": "Thomas",
    "lastName": "Anderson",
    "email": "thomas@nuclino.com",
    "avatarUrl": "https://files.nuclino.com/avatars/9bff403a-6e0a-4f1..."
  }
}"""

SAMPLE_TEAM = """{
  "status": "success",
  "data": {
    "object": "team",
    "id": "020f9737-7b21-442b-85eb-bd420e5593b2",
    "url": "https://app.nuclino.com/Team-One",
    "name": "Team One",
    "createdAt": "2021-10-21T09:34:47.885Z",
    "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b"
  }
}"""

SAMPLE_TEAM_LIST = """{
  "status": "success",
  "data": {
    "object": "list",
    "results": [
      {
        "object": "team",
        "id": "020f9737-7b21-442b-85eb-bd420e5593b2",
        "url": "https://app.nuclino.com/Team-One",
        "name": "Team One",
        "createdAt": "2021-10-21T09:34:47.885Z",
        "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b"
      },
      {
        "object": "team",
        "id": "2e5474ad-c433-4a02-9bde-5455a12d025f",
        "url": "https://app.nuclino.com/Team-Two",
        "name": "Team Two",
        "createdAt": "2021-11-29T14:21:30.052Z",
        "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b"
      }
    ]
  }
}"""

SAMPLE_WORKSPACE = """{
  "status": "success",
  "data": {
    "object": "workspace",
    "id": "127a8c4a-b3c6-4a42-8fef-b6c521e6c8cf",
    "teamId": "020f9737-7b21-442b-85eb-bd420e5593b2",
    "name": "General",
    "createdAt": "2021-12-15T15:54:23.598Z",
    "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
    "fields": [
      {
        "object": "field",
        "id": "1504df6f-5704-43e9-9af9-79ed801828d8",
        "type": "date",
        "name": "My date field"
      }
    ],
    "childIds": ["aaf6d580-565d-497b-9ff3-b32075de3f4c"]
  }
}"""

SAMPLE_WORKSPACE_LIST = """{
  "status": "success",
  "data": {
    "object": "list",
    "results": [
      {
        "object": "workspace",
        "id": "127a8c4a-b3c6-4a42-8fef-b6c521e6c8cf",
        "teamId": "020f9737-7b21-442b-85eb-bd420e5593b2",
        "name": "General",
        "createdAt": "2021-12-15T15:54:23.598Z",
        "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
        "fields": [
          {
            "object": "field",
            "id": "1504df6f-5704-43e9-9af9-79ed801828d8",
            "type": "date",
            "name": "My date field"
          }
        ],
        "childIds": ["aaf6d580-565d-497b-9ff3-b32075de3f4c"]
      },
      {
        "object": "workspace",
        "id": "66be346f-44e2-49da-888b-a2e381d4d92a",
        "teamId": "020f9737-7b21-442b-85eb-bd420e5593b2",
        "name": "Sprint planning",
        "createdAt": "2021-12-15T15:54:05.085Z",
        "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
        "fields": [],
        "childIds": []
      }
    ]
  }
}"""

SAMPLE_ITEM = """{
  "status": "success",
  "data": {
    "object": "item",
    "id": "aaf6d580-565d-497b-9ff3-b32075de3f4c",
    "workspaceId": "127a8c4a-b3c6-4a42-8fef-b6c521e6c8cf",
    "url": "https://app.nuclino.com/t/b/aaf6d580-565d-497b-9ff3-b32075de3f4c",
    "title": "My Item",
    "createdAt": "2021-12-15T15:55:19.527Z",
    "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
    "lastUpdatedAt": "2021-12-15T17:02:53.487Z",
    "lastUpdatedUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
    "fields": {
      "My date field": "2025-01-20"
    },
    "content": "This is *markdown* with a [link](https://app.nuclino.com/t/b/e9e648b3-8ce3-410d-8ef8-51b46c63cdaf)",
    "contentMeta": {
      "itemIds": ["e9e648b3-8ce3-410d-8ef8-51b46c63cdaf"],
      "fileIds": ["eec0a152-b1e9-43fd-bef8-987f95c85c6e"]
    }
  }
}"""

SAMPLE_COLLECTION = """{
  "status": "success",
  "data": {
    "object": "collection",
    "id": "e9e648b3-8ce3-410d-8ef8-51b46c63cdaf",
    "workspaceId": "127a8c4a-b3c6-4a42-8fef-b6c521e6c8cf",
    "url": "https://app.nuclino.com/t/b/e9e648b3-8ce3-410d-8ef8-51b46c63cdaf",
    "title": "My collection",
    "createdAt": "2021-12-15T17:02:56.276Z",
    "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
    "lastUpdatedAt": "2021-12-15T17:03:00.389Z",
    "lastUpdatedUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
    "childIds": ["aaf6d580-565d-497b-9ff3-b32075de3f4c"]
  }
}"""

SAMPLE_PAGE_LIST = """{
  "status": "success",
  "data": {
    "object": "list",
    "results": [
      {
        "object": "item",
        "id": "aaf6d580-565d-497b-9ff3-b32075de3f4c",
        "workspaceId": "127a8c4a-b3c6-4a42-8fef-b6c521e6c8cf",
        "url": "https://app.nuclino.com/t/b/aaf6d580-565d-497b-9ff3-b32075de3f4c",
        "title": "My Item",
        "createdAt": "2021-12-15T15:55:19.527Z",
        "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
        "lastUpdatedAt": "2021-12-15T17:02:53.487Z",
        "lastUpdatedUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
        "fields": {
          "My date field": "2025-01-20"
        },
        "contentMeta": { "itemIds": [], "fileIds": [] }
      },
      {
        "object": "collection",
        "id": "e9e648b3-8ce3-410d-8ef8-51b46c63cdaf",
        "workspaceId": "127a8c4a-b3c6-4a42-8fef-b6c521e6c8cf",
        "url": "https://app.nuclino.com/t/b/e9e648b3-8ce3-410d-8ef8-51b46c63cdaf",
        "title": "My collection",
        "createdAt": "2021-12-15T17:02:56.276Z",
        "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
        "lastUpdatedAt": "2021-12-15T17:03:00.389Z",
        "lastUpdatedUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
        "childIds": []
      }
    ]
  }
}"""

SAMPLE_SEARCH_RESULTS = """{
  "status": "success",
  "data": {
    "object": "list",
    "results": [
      {
        "object": "item",
        "id": "aaf6d580-565d-497b-9ff3-b32075de3f4c",
        "workspaceId": "127a8c4a-b3c6-4a42-8fef-b6c521e6c8cf",
        "url": "https://app.nuclino.com/t/b/aaf6d580-565d-497b-9ff3-b32075de3f4c",
        "title": "My Item",
        "createdAt": "2021-12-15T15:55:19.527Z",
        "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
        "lastUpdatedAt": "2021-12-15T17:02:53.487Z",
        "lastUpdatedUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
        "fields": {},
        "contentMeta": { "itemIds": [], "fileIds": [] },
        "highlight": "This is <mark>markdown</mark>"
      }
    ]
  }
}"""

SAMPLE_FILE = """{
  "status": "success",
  "data": {
    "object": "file",
    "id": "eec0a152-b1e9-43fd-bef8-987f95c85c6e",
    "itemId": "dd9a69db-048d-4644-8738-36bee31bbee0",
    "fileName": "screenshot.png",
    "createdAt": "2021-12-15T07:58:11.196Z",
    "createdUserId": "2e96f3bb-c742-4164-af2c-151ab2fd346b",
    "download": {
      "url": "https://nuclino-files.s3.eu-central-1.amazonaws.com/a122ab11...",
      "expiresAt": "2021-12-15T08:08:49.931Z"
    }
  }
}"""

SAMPLE_DELETED = """{
  "status": "success",
  "data": {
    "id": "aaf6d580-565d-497b-9ff3-b32075de3f4c"
  }
}"""

SAMPLE_FAIL = """{
  "status": "fail",
  "message": "Item not found"
}"""

SAMPLE_ERROR = """{
  "status": "error",
  "message": "Internal server error"
}"""

SAMPLE_SUCCESS_WITHOUT_DATA = """{
  "status": "success"
}"""
