from pydantic import BaseModel, ConfigDict, Field


class Node(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(ge=0)
    counter: int = 0
    expanded: bool = True
    child_ids: list[int] = Field(default_factory=list, alias="childIds")


Tree = dict[int, Node]


class TreeStats(BaseModel):
    node_count: int
    leaf_count: int
    max_depth: int
    root_children: int
    max_children: int
