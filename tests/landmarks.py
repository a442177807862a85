from types import SimpleNamespace

from tracking.heading import LEFT_EAR_TRAGION, NOSE_TIP, RIGHT_EAR_TRAGION

MESH_SIZE = 478


def make_landmarks(nose=(0.5, 0.5, 0.0), left_ear=(0.4, 0.5, 0.1),
                   right_ear=(0.6, 0.5, 0.1), size=MESH_SIZE):
    """Lista no formato do Face Mesh (objetos com x, y, z)."""
    points = [SimpleNamespace(x=0.5, y=0.5, z=0.0) for _ in range(size)]
    for index, coords in ((NOSE_TIP, nose), (LEFT_EAR_TRAGION, left_ear),
                          (RIGHT_EAR_TRAGION, right_ear)):
        if index < size:
            points[index] = SimpleNamespace(x=coords[0], y=coords[1], z=coords[2])
    return points
