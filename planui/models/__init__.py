from planui.models.project import Project, File, UserGroup
from planui.models.project_layer import ProjectLayer, LayerType, LegendType, Provenance
from planui.models.solution import (
    Solution,
    SolutionLayer,
    SolutionWeight,
    SolutionInclude,
    SolutionExclude,
    MembershipSet,
)
